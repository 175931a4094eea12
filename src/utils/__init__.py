"""
Utility modules for review analysis.

Cross-cutting concerns:
- Storage: JSON / CSV export of analysis results
"""
