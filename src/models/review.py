"""
Review data models.

RawRecord is what the parser produces; Review is the cleaned,
type-coerced record every aggregator reads.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict

from src.stages.sentiment import label_sentiment

# One input row: column name -> literal source text
RawRecord = Dict[str, str]

USER_FIELDS = ("user_id", "user_age", "user_country", "user_gender")

REVIEW_FIELDS = (
    "review_id",
    "app_name",
    "app_category",
    "review_text",
    "review_language",
    "rating",
    "review_date",
    "verified_purchase",
    "device_type",
    "num_helpful_votes",
    "app_version",
)

REQUIRED_COLUMNS = REVIEW_FIELDS + USER_FIELDS


@dataclass(frozen=True)
class User:
    """Reviewer details grouped out of the flat source row."""
    user_id: int
    user_age: int
    user_country: str
    user_gender: str = ""  # Only nullable field in a Review

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "user_age": self.user_age,
            "user_country": self.user_country,
            "user_gender": self.user_gender
        }


@dataclass(frozen=True)
class Review:
    """
    A single cleaned app review.
    Produced once by the cleaner and never mutated afterwards.
    """
    review_id: int
    app_name: str
    app_category: str
    review_text: str
    review_language: str
    rating: float  # Expected 0.0-5.0
    review_date: date
    verified_purchase: bool
    device_type: str
    num_helpful_votes: int
    app_version: str
    user: User
    extra: Dict[str, str] = field(default_factory=dict)  # Unrecognized columns, as text

    @property
    def sentiment(self) -> str:
        """Sentiment label derived from the rating."""
        return label_sentiment(self.rating)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        data = {
            "review_id": self.review_id,
            "app_name": self.app_name,
            "app_category": self.app_category,
            "review_text": self.review_text,
            "review_language": self.review_language,
            "rating": self.rating,
            "review_date": self.review_date.isoformat(),
            "verified_purchase": self.verified_purchase,
            "device_type": self.device_type,
            "num_helpful_votes": self.num_helpful_votes,
            "app_version": self.app_version,
            "user": self.user.to_dict()
        }
        data.update(self.extra)
        return data

    def to_record(self) -> RawRecord:
        """
        Flatten back into a RawRecord.

        Feeding the result to the cleaner again yields an equal Review.
        """
        record = {
            "review_id": str(self.review_id),
            "app_name": self.app_name,
            "app_category": self.app_category,
            "review_text": self.review_text,
            "review_language": self.review_language,
            "rating": repr(self.rating),
            "review_date": self.review_date.isoformat(),
            "verified_purchase": "True" if self.verified_purchase else "False",
            "device_type": self.device_type,
            "num_helpful_votes": str(self.num_helpful_votes),
            "app_version": self.app_version,
            "user_id": str(self.user.user_id),
            "user_age": str(self.user.user_age),
            "user_country": self.user.user_country,
            "user_gender": self.user.user_gender
        }
        record.update(self.extra)
        return record
