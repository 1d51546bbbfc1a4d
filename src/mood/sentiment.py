"""Keyword-based sentiment heuristic standing in for a hosted sentiment model."""

import asyncio
import random
from typing import Optional

import structlog

from mood.models import Sentiment
from shared_types import SentimentLabel

logger = structlog.get_logger()

# Matched by substring containment, so "unhappy" hits "happy"
POSITIVE_KEYWORDS = (
    "happy", "good", "great", "amazing", "wonderful",
    "love", "excited", "perfect", "awesome", "fantastic",
)

NEGATIVE_KEYWORDS = (
    "sad", "bad", "terrible", "awful", "hate",
    "stressed", "worried", "overwhelmed", "depressed", "angry",
)

_SCORE_FLOOR = {
    SentimentLabel.POSITIVE: 0.7,
    SentimentLabel.NEGATIVE: 0.7,
    SentimentLabel.NEUTRAL: 0.5,
}
_SCORE_SPAN = 0.3


def count_hits(text: str) -> tuple[int, int]:
    """Count tokens containing a positive / negative keyword.

    A token can count toward both lists.
    """
    tokens = text.lower().split()
    pos = sum(1 for t in tokens if any(k in t for k in POSITIVE_KEYWORDS))
    neg = sum(1 for t in tokens if any(k in t for k in NEGATIVE_KEYWORDS))
    return pos, neg


def classify(text: str, rng: Optional[random.Random] = None) -> Sentiment:
    """Classify text as POSITIVE, NEGATIVE or NEUTRAL.

    The label is deterministic. The score is noise in [0.7, 1.0) for
    POSITIVE/NEGATIVE and [0.5, 0.8) for NEUTRAL, drawn from `rng`.
    """
    pos, neg = count_hits(text)
    if pos > neg:
        label = SentimentLabel.POSITIVE
    elif neg > pos:
        label = SentimentLabel.NEGATIVE
    else:
        label = SentimentLabel.NEUTRAL

    r = (rng or random).random()
    return Sentiment(label=label, score=_SCORE_FLOOR[label] + r * _SCORE_SPAN)


async def analyze_sentiment(
    text: str,
    rng: Optional[random.Random] = None,
    delay: float = 0.0,
) -> Sentiment:
    """Awaitable sentiment call; `delay` simulates remote model latency."""
    if delay > 0:
        await asyncio.sleep(delay)
    sentiment = classify(text, rng)
    logger.debug("sentiment.classified", label=sentiment.label, score=round(sentiment.score, 3))
    return sentiment
