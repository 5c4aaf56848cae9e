"""Aggregate statistics over Hello records."""

from __future__ import annotations

from collections.abc import Iterable

from moodjournal.core.mood import Mood, MoodCategory, category_of
from moodjournal.models.hello import Hello
from moodjournal.schemas.hello import EmotionalStats


def _percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


def compute_stats(hellos: Iterable[Hello]) -> EmotionalStats:
    """Single pass over ``hellos``; the input can be a lazy iterator.

    Ties for the most frequent mood go to the mood declared first in ``Mood``.
    """
    distribution = {mood: 0 for mood in Mood}
    total = 0
    total_byes = 0
    positive = 0
    negative = 0

    for hello in hellos:
        total += 1
        distribution[hello.mood] += 1
        total_byes += len(hello.byes)
        category = category_of(hello.mood)
        if category is MoodCategory.POSITIVE:
            positive += 1
        elif category is MoodCategory.NEGATIVE:
            negative += 1

    # max() keeps the first of equal candidates
    most_frequent = max(Mood, key=lambda mood: distribution[mood])

    return EmotionalStats(
        total_hellos=total,
        mood_distribution=distribution,
        most_frequent_mood=most_frequent,
        average_bye_response_rate=total_byes / total if total else 0.0,
        positive_mood_percentage=_percentage(positive, total),
        negative_mood_percentage=_percentage(negative, total),
    )
