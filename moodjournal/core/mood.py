"""Mood values and the fixed lookup tables built on them."""

from __future__ import annotations

import enum


class Mood(str, enum.Enum):
    HAPPY = "HAPPY"
    EXCITED = "EXCITED"
    SLEEPY = "SLEEPY"
    HUNGRY = "HUNGRY"


class MoodCategory(str, enum.Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


POSITIVE_MOODS = frozenset({Mood.HAPPY, Mood.EXCITED})
NEGATIVE_MOODS = frozenset({Mood.SLEEPY, Mood.HUNGRY})

_OPTIMAL_WAVE_COUNTS = {
    Mood.HAPPY: 3,
    Mood.EXCITED: 5,
    Mood.SLEEPY: 1,
    Mood.HUNGRY: 2,
}
DEFAULT_WAVE_COUNT = 1

_FAREWELL_MESSAGES = {
    Mood.HAPPY: "See you soon! Keep that smile on!",
    Mood.EXCITED: "Bye bye! Go get 'em, full speed ahead!",
    Mood.SLEEPY: "Good night, get some well-earned rest.",
    Mood.HUNGRY: "Go grab something tasty. Bon appetit!",
}
DEFAULT_FAREWELL_MESSAGE = "Goodbye, take care!"

ENCOURAGEMENT_SUFFIX = " (Cheer up! Tomorrow will be better.)"


def category_of(mood: Mood) -> MoodCategory:
    """Every mood is either positive or negative; there is no neutral mood."""
    if mood in POSITIVE_MOODS:
        return MoodCategory.POSITIVE
    return MoodCategory.NEGATIVE


def is_positive(mood: Mood) -> bool:
    return category_of(mood) is MoodCategory.POSITIVE


def optimal_wave_count(mood: Mood) -> int:
    """How many times an auto-generated Bye waves for a given mood."""
    return _OPTIMAL_WAVE_COUNTS.get(mood, DEFAULT_WAVE_COUNT)


def farewell_message(mood: Mood) -> str:
    return _FAREWELL_MESSAGES.get(mood, DEFAULT_FAREWELL_MESSAGE)


def enhance_message(mood: Mood, message: str) -> str:
    """Append the encouragement suffix for negative moods.

    Not idempotent: calling it twice appends the suffix twice. It is applied
    once, when a Hello is created, and never on updates.
    """
    if category_of(mood) is MoodCategory.NEGATIVE:
        return f"{message}{ENCOURAGEMENT_SUFFIX}"
    return message
