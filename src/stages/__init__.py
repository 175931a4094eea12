"""
Pipeline stages for review analysis.

Contains the modules that process the dataset in order:
- Ingestion (Parser)
- Cleaning (Cleaner)
- Sentiment (Labeler)
- Aggregation (Sentiment by app / language, Summary statistics)
"""
