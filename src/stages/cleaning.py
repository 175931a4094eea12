"""
Cleaning stage.

Drops incomplete rows by review_id, coerces types, and groups the
user columns into a nested User.
"""

import logging
import math
import re
from datetime import date
from typing import Iterable, List, Set, Tuple, Union

import pandas as pd

from src.exceptions import ParseError, TypeCoercionError
from src.models.review import RawRecord, Review, User, REQUIRED_COLUMNS, REVIEW_FIELDS, USER_FIELDS

logger = logging.getLogger(__name__)

ExclusionKey = Union[int, str]

# ASCII digits only; int() and float() also take "1_000" and non-Latin digits
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")
_DECIMAL = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")
_HAS_DIGIT = re.compile(r"[0-9]")


class ReviewCleaner:
    """
    Turns RawRecords into Reviews.

    Two passes over the input:
    1. Collect the review_id of every record with an empty non-nullable field
    2. Convert every record whose review_id was not collected

    Exclusion is keyed by review_id, so a complete row is still dropped when
    another row with the same id is incomplete.
    """

    def __init__(
        self,
        nullable_fields: Iterable[str] = ("user_gender",),
        rating_range: Tuple[float, float] = (0.0, 5.0)
    ):
        """
        Initialize cleaner.

        Args:
            nullable_fields: Columns allowed to be empty
            rating_range: Expected (min, max) rating; values outside are
                kept but logged
        """
        self.nullable_fields = frozenset(nullable_fields)
        self.rating_min, self.rating_max = rating_range

    def clean(self, records: List[RawRecord]) -> List[Review]:
        """
        Validate, filter and coerce records.

        Args:
            records: Parser output, in input order

        Returns:
            Reviews in input order, minus every excluded review_id

        Raises:
            ParseError: If a record is missing a required column
            TypeCoercionError: If a kept record has a non-numeric or
                undatable value
        """
        for index, record in enumerate(records):
            missing = [c for c in REQUIRED_COLUMNS if c not in record]
            if missing:
                raise ParseError(f"Record {index} is missing required columns: {missing}")

        excluded = self._find_excluded_ids(records)

        reviews = []
        for record in records:
            if _exclusion_key(record["review_id"]) in excluded:
                continue
            reviews.append(self._to_review(record))

        logger.info(
            f"Cleaned {len(records)} records: {len(excluded)} review_ids excluded, "
            f"{len(records) - len(reviews)} rows dropped, {len(reviews)} reviews kept"
        )
        return reviews

    def _find_excluded_ids(self, records: List[RawRecord]) -> Set[ExclusionKey]:
        """Collect review_ids of records with an empty non-nullable field."""
        excluded = set()
        for record in records:
            for key, value in record.items():
                if value == "" and key not in self.nullable_fields:
                    logger.debug(f"Excluding review_id={record['review_id']!r}: empty {key}")
                    excluded.add(_exclusion_key(record["review_id"]))
                    break
        return excluded

    def _to_review(self, record: RawRecord) -> Review:
        """Build a Review from a single complete record."""
        review_id = record["review_id"]

        rating = _to_float(record, "rating")
        if not (self.rating_min <= rating <= self.rating_max):
            logger.warning(
                f"Rating {rating} for review_id={review_id} outside "
                f"{self.rating_min}-{self.rating_max}"
            )

        user = User(
            user_id=_to_int(record, "user_id"),
            user_age=_to_int(record, "user_age"),
            user_country=record["user_country"],
            user_gender=record["user_gender"]
        )

        extra = {
            key: value for key, value in record.items()
            if key not in REVIEW_FIELDS and key not in USER_FIELDS
        }

        return Review(
            review_id=_to_int(record, "review_id"),
            app_name=record["app_name"],
            app_category=record["app_category"],
            review_text=record["review_text"],
            review_language=record["review_language"],
            rating=rating,
            review_date=_to_date(record, "review_date"),
            verified_purchase=record["verified_purchase"] == "True",
            device_type=record["device_type"],
            num_helpful_votes=_to_int(record, "num_helpful_votes"),
            app_version=record["app_version"],
            user=user,
            extra=extra
        )


def _exclusion_key(review_id: str) -> ExclusionKey:
    """Integer value of a review_id, or the raw text when it is not numeric."""
    if _INTEGER.fullmatch(review_id):
        return int(review_id)
    return review_id


def _to_int(record: RawRecord, field: str) -> int:
    value = record[field]
    if not _INTEGER.fullmatch(value):
        raise TypeCoercionError(field, value, record.get("review_id"), "not a base-10 integer")
    return int(value)


def _to_float(record: RawRecord, field: str) -> float:
    value = record[field]
    if not _DECIMAL.fullmatch(value):
        raise TypeCoercionError(field, value, record.get("review_id"), "not a number")

    number = float(value)
    if not math.isfinite(number):
        raise TypeCoercionError(field, value, record.get("review_id"), "not a finite number")
    return number


def _to_date(record: RawRecord, field: str) -> date:
    value = record[field]
    # pandas resolves "now" / "today" to the run date
    if not _HAS_DIGIT.search(value):
        raise TypeCoercionError(field, value, record.get("review_id"), "not a calendar date")

    try:
        parsed = pd.to_datetime(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise TypeCoercionError(field, value, record.get("review_id"), "not a date") from e

    if pd.isna(parsed):
        raise TypeCoercionError(field, value, record.get("review_id"), "not a date")
    return parsed.date()


def clean(records: List[RawRecord]) -> List[Review]:
    """Clean records with the default cleaner."""
    return ReviewCleaner().clean(records)
