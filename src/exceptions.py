"""
Pipeline errors.

Both errors are fatal for a run: the pipeline aborts and no partial
report is produced.
"""

from typing import Optional


class ParseError(ValueError):
    """Input source is unreadable, has no header row, or is malformed."""


class TypeCoercionError(ValueError):
    """
    A field expected to be numeric or date-like failed conversion.

    Attributes:
        field: Column name that failed
        value: Offending source text
        review_id: Raw review_id of the row, when known
    """

    def __init__(self, field: str, value: str, review_id: Optional[str] = None, reason: str = ""):
        self.field = field
        self.value = value
        self.review_id = review_id

        message = f"Cannot convert {field}={value!r}"
        if review_id is not None:
            message += f" (review_id={review_id!r})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
