"""
Storage utility.

Writes analysis results to disk for inspection.
"""

import json
import os
import logging
from typing import List

import pandas as pd

from src.models.report import AnalysisReport
from src.models.review import Review

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Manages output files for a pipeline run.

    Handles:
    - Full report (analysis_report.json)
    - Sentiment tables (sentiment_by_app.csv, sentiment_by_language.csv)
    - Cleaned reviews (cleaned_reviews.json), when requested
    """

    REPORT_FILE = "analysis_report.json"
    APP_TABLE_FILE = "sentiment_by_app.csv"
    LANGUAGE_TABLE_FILE = "sentiment_by_language.csv"
    CLEANED_REVIEWS_FILE = "cleaned_reviews.json"

    def __init__(self, output_dir: str):
        """
        Initialize storage.

        Args:
            output_dir: Directory for all output files (created if missing)
        """
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

        logger.info(f"Initialized ReportStorage with output_dir={output_dir}")

    def save_report(self, report: AnalysisReport) -> str:
        """
        Save the report as JSON plus one CSV per sentiment table.

        Returns:
            Path to the JSON report
        """
        report_path = os.path.join(self.output_dir, self.REPORT_FILE)

        try:
            with open(report_path, 'w', encoding='utf-8') as f:
                json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            logger.info(f"Saved report to {report_path}")
        except Exception as e:
            logger.error(f"Failed to save report: {e}")
            raise

        self._save_table(
            [s.to_dict() for s in report.sentiment_by_app],
            ["app_name", "positive", "neutral", "negative"],
            self.APP_TABLE_FILE
        )
        self._save_table(
            [s.to_dict() for s in report.sentiment_by_language],
            ["lang_name", "positive", "neutral", "negative"],
            self.LANGUAGE_TABLE_FILE
        )

        return report_path

    def save_cleaned_reviews(self, reviews: List[Review]) -> str:
        """
        Save cleaned reviews as a JSON array.

        Returns:
            Path to the written file
        """
        filepath = os.path.join(self.output_dir, self.CLEANED_REVIEWS_FILE)

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump([r.to_dict() for r in reviews], f, indent=2, ensure_ascii=False)
            logger.info(f"Saved {len(reviews)} cleaned reviews to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save cleaned reviews: {e}")
            raise

        return filepath

    def _save_table(self, rows: List[dict], columns: List[str], filename: str) -> str:
        """Write rows to CSV, keeping the header even when there are no rows."""
        filepath = os.path.join(self.output_dir, filename)

        df = pd.DataFrame(rows, columns=columns)
        try:
            df.to_csv(filepath, index=False)
            logger.info(f"Saved {len(df)} rows to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save {filename}: {e}")
            raise

        return filepath
