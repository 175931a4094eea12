"""
App Review Analysis

CLI entry point for running the analysis pipeline.
"""

import argparse
import logging
import sys

from src.exceptions import ParseError, TypeCoercionError
from src.orchestrator import PipelineOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="App Review Analysis - sentiment and usage statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the default dataset and print the summary
  python main.py

  # Analyze a specific file and write JSON/CSV reports
  python main.py --input data/reviews.csv --output-dir output

  # Semicolon-delimited file, keeping the cleaned reviews too
  python main.py --input data/reviews_eu.csv --delimiter ";" \\
                 --output-dir output --save-cleaned
        """
    )

    parser.add_argument(
        "--input",
        default=str(settings.INPUT_PATH),
        help=f"Reviews CSV file (default: {settings.INPUT_PATH})"
    )

    parser.add_argument(
        "--output-dir",
        help="Directory for report files. Reports are not written if omitted"
    )

    parser.add_argument(
        "--delimiter",
        default=settings.CSV_DELIMITER,
        help=f"Field delimiter; pass 'auto' to detect it (default: {settings.CSV_DELIMITER!r})"
    )

    parser.add_argument(
        "--save-cleaned",
        action="store_true",
        default=settings.SAVE_CLEANED_REVIEWS,
        help="Also write cleaned_reviews.json (requires --output-dir)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    delimiter = None if args.delimiter == "auto" else args.delimiter

    # Print banner
    print("=" * 60)
    print("App Review Analysis")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Output: {args.output_dir or '(not saved)'}")
    print("=" * 60)
    print()

    try:
        orchestrator = PipelineOrchestrator(
            output_dir=args.output_dir,
            delimiter=delimiter,
            save_cleaned=args.save_cleaned
        )
        report = orchestrator.run(args.input)

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        print("\n⚠️  Pipeline interrupted")
        sys.exit(1)

    except (ParseError, TypeCoercionError) as e:
        logger.error(f"Invalid input: {e}", exc_info=True)
        print(f"\n❌ Invalid input: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        print(f"\n❌ Pipeline failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)

    summary = report.summary

    print()
    print("=" * 60)
    print("✅ Analysis complete")
    print("=" * 60)
    print(f"Reviews: {report.total_reviews} kept, {report.dropped_records} dropped")
    print(f"Most reviewed app: {summary.most_reviewed_app} ({summary.most_reviews} reviews)")
    print(f"Most used device: {summary.most_used_device} ({summary.most_devices} reviews)")
    print(f"Average rating: {summary.avg_rating:.2f}")
    print()
    print("Sentiment by app (positive / neutral / negative):")
    for entry in report.sentiment_by_app:
        print(f"  {entry.app_name}: {entry.positive} / {entry.neutral} / {entry.negative}")
    print()
    print("Sentiment by language (positive / neutral / negative):")
    for entry in report.sentiment_by_language:
        print(f"  {entry.lang_name}: {entry.positive} / {entry.neutral} / {entry.negative}")
    print("=" * 60)

    logger.info("Analysis completed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
