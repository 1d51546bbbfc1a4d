"""Canned encouragement messages shown after a mood is logged."""

import random
from typing import Optional

from shared_types import SentimentLabel

INSIGHTS = {
    SentimentLabel.POSITIVE: [
        "Your positive energy is shining through! Keep up the great work! ✨",
        "It's wonderful to see you feeling good. Remember to savor these moments! 🌟",
        "Your optimism is inspiring! Consider sharing this positive energy with others. 💫",
    ],
    SentimentLabel.NEGATIVE: [
        "It's okay to have difficult days. Remember, this feeling is temporary. 🤗",
        "Take some time for self-care today. You deserve kindness, especially from yourself. 💙",
        "Consider reaching out to someone you trust or try a calming activity. You're not alone. 🌱",
    ],
    SentimentLabel.NEUTRAL: [
        "Every day doesn't have to be extraordinary, and that's perfectly fine. 🌸",
        "Steady emotions can be a sign of balance. Take note of what's working for you. ⚖️",
        "Sometimes neutral is exactly what we need. Honor your current state. 🍃",
    ],
}


def pick_insight(label: str, rng: Optional[random.Random] = None) -> str:
    messages = INSIGHTS.get(label, INSIGHTS[SentimentLabel.NEUTRAL])
    return (rng or random).choice(messages)


def greeting(hour: int) -> str:
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    return "Good evening"
