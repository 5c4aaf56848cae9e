"""Classifies a mood change and picks a suggestion for it."""

from __future__ import annotations

from moodjournal.core.mood import Mood, MoodCategory, category_of
from moodjournal.schemas.hello import MoodChangeResult

IMPROVING_SUGGESTION = "Your mood is picking up. Whatever you did, keep doing it!"
WORSENING_SUGGESTION = "Your mood dipped a little. Take a short break and be kind to yourself."
REPEATED_MOOD_SUGGESTION = "You've been feeling {mood} for a while now. Maybe try something new today?"
POSITIVE_SUGGESTION = "Nice vibes! Share that energy with someone."
NEGATIVE_SUGGESTION = "Hang in there. A snack, a nap or a walk might help."

# Runs at least this long get the repeated-mood suggestion
REPEATED_MOOD_MIN_RUN = 2


def analyze_transition(
    previous_mood: Mood | None,
    current_mood: Mood,
    consecutive_same_mood_count: int = 0,
) -> MoodChangeResult:
    is_improving = False
    is_worsening = False
    if previous_mood is not None:
        before = category_of(previous_mood)
        after = category_of(current_mood)
        is_improving = before is MoodCategory.NEGATIVE and after is MoodCategory.POSITIVE
        is_worsening = before is MoodCategory.POSITIVE and after is MoodCategory.NEGATIVE

    if is_improving:
        suggestion = IMPROVING_SUGGESTION
    elif is_worsening:
        suggestion = WORSENING_SUGGESTION
    elif consecutive_same_mood_count >= REPEATED_MOOD_MIN_RUN:
        suggestion = REPEATED_MOOD_SUGGESTION.format(mood=current_mood.value.lower())
    elif category_of(current_mood) is MoodCategory.POSITIVE:
        suggestion = POSITIVE_SUGGESTION
    else:
        suggestion = NEGATIVE_SUGGESTION

    return MoodChangeResult(
        previous_mood=previous_mood,
        current_mood=current_mood,
        is_improving=is_improving,
        is_worsening=is_worsening,
        consecutive_same_mood_count=consecutive_same_mood_count,
        suggestion=suggestion,
    )
