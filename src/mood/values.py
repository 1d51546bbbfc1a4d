"""Mood label to numeric scale and display helpers."""

from typing import Optional

from shared_types import Mood

NEUTRAL_VALUE = 3

_MOOD_VALUES = {
    Mood.VERY_SAD: 1,
    Mood.SAD: 2,
    Mood.NEUTRAL: 3,
    Mood.HAPPY: 4,
    Mood.VERY_HAPPY: 5,
}

_MOOD_EMOJIS = {
    Mood.VERY_HAPPY: "😄",
    Mood.HAPPY: "🙂",
    Mood.NEUTRAL: "😐",
    Mood.SAD: "😞",
    Mood.VERY_SAD: "😢",
}


def mood_to_value(mood: Optional[str]) -> int:
    """Map a mood label to 1-5. Unknown labels map to neutral (3)."""
    return _MOOD_VALUES.get(mood, NEUTRAL_VALUE)


def mood_emoji(mood: Optional[str]) -> str:
    return _MOOD_EMOJIS.get(mood, _MOOD_EMOJIS[Mood.NEUTRAL])


def mood_label(mood: str) -> str:
    """Human label, e.g. "very-happy" -> "very happy"."""
    return mood.replace("-", " ", 1)
