"""
Sentiment Labeler.

Maps a numeric star rating to a sentiment category.
"""

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"

SENTIMENTS = (POSITIVE, NEUTRAL, NEGATIVE)

POSITIVE_ABOVE = 4.0
NEGATIVE_BELOW = 2.0


def label_sentiment(rating: float) -> str:
    """
    Label a rating as positive, neutral or negative.

    Args:
        rating: Star rating (normally 0.0-5.0)

    Returns:
        "positive" if rating > 4, "negative" if rating < 2, else "neutral".
        Both 2.0 and 4.0 are neutral.
    """
    if rating > POSITIVE_ABOVE:
        return POSITIVE
    elif rating < NEGATIVE_BELOW:
        return NEGATIVE
    else:
        return NEUTRAL
