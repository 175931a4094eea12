"""
Report data models.

Outputs of the aggregators and the pipeline as a whole.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.stages.sentiment import POSITIVE, NEUTRAL, NEGATIVE


@dataclass
class SentimentCounts:
    """Positive / neutral / negative tallies for one group."""
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    def add(self, label: str) -> None:
        """Increment the counter matching a sentiment label."""
        if label == POSITIVE:
            self.positive += 1
        elif label == NEUTRAL:
            self.neutral += 1
        elif label == NEGATIVE:
            self.negative += 1
        else:
            raise ValueError(
                f"Invalid sentiment: {label}. Must be 'positive', 'neutral', or 'negative'"
            )

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative


@dataclass
class AppSentiment(SentimentCounts):
    """Sentiment counts for a single app."""
    app_name: str = ""

    def to_dict(self) -> dict:
        return {
            "app_name": self.app_name,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative
        }


@dataclass
class LanguageSentiment(SentimentCounts):
    """
    Sentiment counts for a single review language.
    Serialized under "lang_name", not "review_language".
    """
    lang_name: str = ""

    def to_dict(self) -> dict:
        return {
            "lang_name": self.lang_name,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative
        }


@dataclass(frozen=True)
class SummaryStatistics:
    """Headline figures for the most reviewed app."""
    most_reviewed_app: Optional[str]
    most_reviews: int
    most_used_device: Optional[str]
    most_devices: int
    avg_rating: float

    def to_dict(self) -> dict:
        return {
            "mostReviewedApp": self.most_reviewed_app,
            "mostReviews": self.most_reviews,
            "mostUsedDevice": self.most_used_device,
            "mostDevices": self.most_devices,
            "avgRating": self.avg_rating
        }


@dataclass
class AnalysisReport:
    """Everything a single pipeline run produces."""
    source: str
    total_records: int  # Rows read by the parser
    total_reviews: int  # Reviews kept by the cleaner
    sentiment_by_app: List[AppSentiment] = field(default_factory=list)
    sentiment_by_language: List[LanguageSentiment] = field(default_factory=list)
    summary: Optional[SummaryStatistics] = None

    @property
    def dropped_records(self) -> int:
        return self.total_records - self.total_reviews

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "source": self.source,
            "total_records": self.total_records,
            "total_reviews": self.total_reviews,
            "dropped_records": self.dropped_records,
            "sentiment_by_app": [s.to_dict() for s in self.sentiment_by_app],
            "sentiment_by_language": [s.to_dict() for s in self.sentiment_by_language],
            "summary": self.summary.to_dict() if self.summary else None
        }
