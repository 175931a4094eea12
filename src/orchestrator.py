"""
Pipeline Orchestrator.

Runs the stages in order over a single dataset:
Ingestion -> Cleaning -> Aggregation.
"""

import logging
from datetime import datetime
from typing import Optional

from src.models.report import AnalysisReport
from src.stages.aggregation import SentimentAggregator, SummaryStatistician
from src.stages.cleaning import ReviewCleaner
from src.stages.ingestion import ReviewParser
from src.utils.storage import ReportStorage
import config.settings as settings

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Orchestrates one analysis run.

    Coordinates:
    1. Ingestion -> 2. Cleaning -> 3. Sentiment by app / language
    -> 4. Summary statistics -> 5. Optional report export

    Errors from any stage propagate; there is no partial result.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        delimiter: Optional[str] = settings.CSV_DELIMITER,
        save_cleaned: bool = settings.SAVE_CLEANED_REVIEWS
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            output_dir: Directory for report files, or None to skip export
            delimiter: CSV delimiter (None to sniff)
            save_cleaned: Also export the cleaned reviews
        """
        self.save_cleaned = save_cleaned

        self.parser = ReviewParser(
            delimiter=delimiter,
            encoding=settings.CSV_ENCODING
        )
        self.cleaner = ReviewCleaner(
            nullable_fields=settings.NULLABLE_FIELDS,
            rating_range=(settings.RATING_MIN, settings.RATING_MAX)
        )
        self.sentiment_aggregator = SentimentAggregator()
        self.statistician = SummaryStatistician()

        self.storage = ReportStorage(output_dir) if output_dir else None

        logger.info("Pipeline initialized successfully")

    def run(self, input_path: str) -> AnalysisReport:
        """
        Run the complete pipeline on a dataset file.

        Args:
            input_path: Path to the reviews CSV

        Returns:
            AnalysisReport with sentiment tables and summary statistics

        Raises:
            ParseError: If the file cannot be read or parsed
            TypeCoercionError: If a kept row has an unconvertible value
        """
        logger.info(f"Starting pipeline for {input_path}")
        start_time = datetime.now()

        # STAGE 1: Ingestion
        records = self.parser.parse_file(input_path)

        # STAGE 2: Cleaning
        reviews = self.cleaner.clean(records)
        if not reviews:
            logger.warning(f"No reviews left after cleaning {input_path}")

        # STAGE 3: Sentiment aggregation
        by_app = self.sentiment_aggregator.by_app(reviews)
        by_language = self.sentiment_aggregator.by_language(reviews)

        # STAGE 4: Summary statistics
        summary = self.statistician.compute(reviews)

        report = AnalysisReport(
            source=str(input_path),
            total_records=len(records),
            total_reviews=len(reviews),
            sentiment_by_app=by_app,
            sentiment_by_language=by_language,
            summary=summary
        )

        # STAGE 5: Export
        if self.storage:
            self.storage.save_report(report)
            if self.save_cleaned:
                self.storage.save_cleaned_reviews(reviews)

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Pipeline complete in {processing_time:.2f}s: "
            f"{report.total_records} records -> {report.total_reviews} reviews"
        )
        return report
