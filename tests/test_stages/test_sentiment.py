"""
Unit tests for the Sentiment Labeler.
"""

import pytest
from src.stages.sentiment import label_sentiment, POSITIVE, NEUTRAL, NEGATIVE


@pytest.mark.parametrize("rating, expected", [
    (5.0, "positive"),
    (4.5, "positive"),
    (4.01, "positive"),
    (4.0, "neutral"),
    (3.0, "neutral"),
    (2.0, "neutral"),
    (1.99, "negative"),
    (1.0, "negative"),
    (0.0, "negative"),
])
def test_label_sentiment(rating, expected):
    """Test thresholds: > 4 positive, < 2 negative, otherwise neutral."""
    assert label_sentiment(rating) == expected


def test_boundaries_are_neutral():
    """Test that exactly 2.0 and 4.0 are neutral."""
    assert label_sentiment(2.0) == NEUTRAL
    assert label_sentiment(4.0) == NEUTRAL


def test_integer_ratings():
    """Test that plain ints are labeled the same as floats."""
    assert label_sentiment(5) == POSITIVE
    assert label_sentiment(1) == NEGATIVE
    assert label_sentiment(3) == NEUTRAL


def test_out_of_range_ratings():
    """Test that the labeler is total over values outside 0-5."""
    assert label_sentiment(10.0) == POSITIVE
    assert label_sentiment(-1.0) == NEGATIVE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
