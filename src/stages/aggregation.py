"""
Sentiment and Summary Aggregators.

Folds cleaned reviews into grouped sentiment counts and headline
statistics. All accumulation state is local to a single call.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Tuple

from src.models.report import AppSentiment, LanguageSentiment, SummaryStatistics
from src.models.review import Review
from src.stages.sentiment import label_sentiment

logger = logging.getLogger(__name__)


class SentimentAggregator:
    """
    Counts positive / neutral / negative reviews per group.
    Groups are reported in first-seen order.
    """

    def by_app(self, reviews: List[Review]) -> List[AppSentiment]:
        """
        Sentiment counts per app_name.

        Args:
            reviews: Cleaned reviews

        Returns:
            One AppSentiment per distinct app, in first-seen order
        """
        groups: Dict[str, AppSentiment] = {}

        for review in reviews:
            app = review.app_name
            if app not in groups:
                groups[app] = AppSentiment(app_name=app)
            groups[app].add(label_sentiment(review.rating))

        logger.info(f"Aggregated sentiment for {len(groups)} apps")
        return list(groups.values())

    def by_language(self, reviews: List[Review]) -> List[LanguageSentiment]:
        """
        Sentiment counts per review_language.

        Returns:
            One LanguageSentiment per distinct language, in first-seen order
        """
        groups: Dict[str, LanguageSentiment] = {}

        for review in reviews:
            lang = review.review_language
            if lang not in groups:
                groups[lang] = LanguageSentiment(lang_name=lang)
            groups[lang].add(label_sentiment(review.rating))

        logger.info(f"Aggregated sentiment for {len(groups)} languages")
        return list(groups.values())


class SummaryStatistician:
    """
    Answers three questions about the dataset:
    - Which app has the most reviews, and how many?
    - For that app, which device is used most?
    - For that app, what is the average rating?
    """

    def compute(self, reviews: List[Review]) -> SummaryStatistics:
        """
        Compute summary statistics.

        Ties for most reviews or most common device go to whichever value
        was seen first.

        Args:
            reviews: Cleaned reviews

        Returns:
            SummaryStatistics; for an empty input the app and device are
            None and every figure is 0
        """
        if not reviews:
            logger.warning("No reviews to summarize")
            return SummaryStatistics(
                most_reviewed_app=None,
                most_reviews=0,
                most_used_device=None,
                most_devices=0,
                avg_rating=0.0
            )

        app_counts = Counter(review.app_name for review in reviews)
        most_reviewed_app, most_reviews = _first_max(app_counts)

        app_reviews = [r for r in reviews if r.app_name == most_reviewed_app]

        device_counts = Counter(review.device_type for review in app_reviews)
        most_used_device, most_devices = _first_max(device_counts)

        avg_rating = sum(r.rating for r in app_reviews) / len(app_reviews)

        logger.info(
            f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews, "
            f"top device {most_used_device}, avg rating {avg_rating:.2f})"
        )

        return SummaryStatistics(
            most_reviewed_app=most_reviewed_app,
            most_reviews=most_reviews,
            most_used_device=most_used_device,
            most_devices=most_devices,
            avg_rating=avg_rating
        )


def _first_max(counts: Counter) -> Tuple[Optional[str], int]:
    """Key with the strictly greatest count; earliest key wins ties."""
    best_key = None
    best_count = 0
    for key, count in counts.items():
        if count > best_count:
            best_key = key
            best_count = count
    return best_key, best_count


def sentiment_by_app(reviews: List[Review]) -> List[AppSentiment]:
    return SentimentAggregator().by_app(reviews)


def sentiment_by_language(reviews: List[Review]) -> List[LanguageSentiment]:
    return SentimentAggregator().by_language(reviews)


def summary_statistics(reviews: List[Review]) -> SummaryStatistics:
    return SummaryStatistician().compute(reviews)
