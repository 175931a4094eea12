"""
Configuration settings for the review analysis pipeline.

Centralized configuration for all stages and the CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Input dataset
INPUT_PATH = Path(os.getenv("REVIEWS_CSV_PATH", str(DATA_ROOT / "reviews.csv")))
CSV_DELIMITER = os.getenv("CSV_DELIMITER", ",")
CSV_ENCODING = "utf-8-sig"  # Tolerates a leading BOM

# Cleaning
NULLABLE_FIELDS = ("user_gender",)  # Only these columns may be empty
RATING_MIN = 0.0
RATING_MAX = 5.0

# Output
SAVE_CLEANED_REVIEWS = False  # Also write cleaned_reviews.json next to the report

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_analysis.log"
