"""Tests for the keyword sentiment heuristic."""

import asyncio
import random
import time

import pytest

from mood.sentiment import analyze_sentiment, classify, count_hits
from shared_types import SentimentLabel


class TestClassify:
    """Label is deterministic; score is bounded noise."""

    def test_positive(self):
        assert classify("I am happy and great").label == SentimentLabel.POSITIVE

    def test_negative(self):
        assert classify("I feel sad and awful").label == SentimentLabel.NEGATIVE

    def test_neutral_no_keywords(self):
        assert classify("nothing special today").label == SentimentLabel.NEUTRAL

    def test_empty_text_is_neutral(self):
        assert classify("").label == SentimentLabel.NEUTRAL

    def test_tie_is_neutral(self):
        assert classify("good morning, bad evening").label == SentimentLabel.NEUTRAL

    def test_case_insensitive(self):
        assert classify("AMAZING").label == SentimentLabel.POSITIVE

    def test_substring_match(self):
        """Keywords match anywhere inside a token."""
        assert count_hits("unhappy") == (1, 0)
        assert count_hits("lovely") == (1, 0)

    def test_token_counts_once_per_list(self):
        """A token with two positive keywords is still one hit."""
        assert count_hits("greatgood") == (1, 0)

    def test_token_can_hit_both_lists(self):
        # "sadgood" contains "sad" and "good"
        assert count_hits("sadgood") == (1, 1)
        assert classify("sadgood").label == SentimentLabel.NEUTRAL

    def test_splits_on_any_whitespace(self):
        assert count_hits("great\nday\tloved") == (2, 0)

    def test_label_stable_across_rngs(self):
        labels = {classify("stressed and worried but happy", random.Random(s)).label for s in range(20)}
        assert labels == {SentimentLabel.NEGATIVE}


class TestScoreRanges:
    @pytest.mark.parametrize("text", ["great day", "awful day"])
    def test_polar_score_range(self, text):
        rng = random.Random(0)
        for _ in range(200):
            score = classify(text, rng).score
            assert 0.7 <= score < 1.0

    def test_neutral_score_range(self):
        rng = random.Random(0)
        for _ in range(200):
            score = classify("just a day", rng).score
            assert 0.5 <= score < 0.8

    def test_seeded_rng_is_reproducible(self):
        a = classify("great", random.Random(7)).score
        b = classify("great", random.Random(7)).score
        assert a == b


class TestAnalyzeSentiment:
    @pytest.mark.asyncio
    async def test_returns_same_label_as_classify(self):
        result = await analyze_sentiment("what a wonderful day")
        assert result.label == SentimentLabel.POSITIVE

    @pytest.mark.asyncio
    async def test_delay_suspends(self):
        start = time.monotonic()
        await analyze_sentiment("ok", delay=0.05)
        assert time.monotonic() - start >= 0.04

    @pytest.mark.asyncio
    async def test_other_tasks_run_during_delay(self):
        ran = []

        async def other():
            ran.append(True)

        await asyncio.gather(analyze_sentiment("ok", delay=0.02), other())
        assert ran == [True]
