"""Hello and Bye schemas."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import Field

from moodjournal.core.errors import InvalidQuery
from moodjournal.core.mood import Mood
from moodjournal.schemas.common import CamelModel

ORDERABLE_FIELDS = ("id", "message", "mood", "timestamp")
SORT_DIRECTIONS = ("asc", "desc")


class HelloCreate(CamelModel):
    message: str = Field(min_length=1)
    mood: Mood


class HelloUpdate(CamelModel):
    message: str | None = Field(default=None, min_length=1)
    mood: Mood | None = None


class ByeCreate(CamelModel):
    message: str | None = None
    mood: Mood | None = None
    wave_count: int | None = Field(default=None, ge=0)


class ByeResult(CamelModel):
    id: int
    message: str
    mood: Mood
    wave_count: int
    is_enthusiastic: bool


class HelloResult(CamelModel):
    id: int
    message: str
    mood: Mood
    timestamp: datetime
    byes: list[ByeResult]
    byes_count: int
    total_wave_count: int
    is_positive_mood: bool


class EmotionalStats(CamelModel):
    total_hellos: int
    mood_distribution: dict[Mood, int]
    most_frequent_mood: Mood
    average_bye_response_rate: float
    positive_mood_percentage: float
    negative_mood_percentage: float


class MoodChangeResult(CamelModel):
    previous_mood: Mood | None
    current_mood: Mood
    is_improving: bool
    is_worsening: bool
    consecutive_same_mood_count: int
    suggestion: str


class HelloQuery(CamelModel):
    """Filter, paging and ordering for a Hello listing."""

    ids: list[int] | None = None
    message: str | None = None
    moods: list[Mood] | None = None
    skip: int = 0
    take: int | None = None
    order_by: list[tuple[str, str]] = Field(default_factory=list)

    @classmethod
    def from_params(
        cls,
        *,
        ids: str | None = None,
        message: str | None = None,
        mood_types: str | None = None,
        skip: int = 0,
        take: int | None = None,
        order_by: str | None = None,
    ) -> HelloQuery:
        """Build a query from raw query-string values.

        ``ids`` and ``mood_types`` are comma separated; ``order_by`` is a JSON
        object such as ``{"timestamp": "desc"}``.
        """
        return cls(
            ids=_parse_ids(ids),
            message=message or None,
            moods=_parse_moods(mood_types),
            skip=skip,
            take=take,
            order_by=_parse_order_by(order_by),
        )


def _split(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _parse_ids(raw: str | None) -> list[int] | None:
    if not raw:
        return None
    try:
        return [int(part) for part in _split(raw)]
    except ValueError:
        raise InvalidQuery(f"ids must be comma separated integers, got {raw!r}")


def parse_mood(raw: str) -> Mood:
    """Mood from a query-string value, case-insensitive."""
    try:
        return Mood(raw.strip().upper())
    except ValueError:
        raise InvalidQuery(f"Unknown mood {raw!r}")


def _parse_moods(raw: str | None) -> list[Mood] | None:
    if not raw:
        return None
    return [parse_mood(part) for part in _split(raw)]


def _parse_order_by(raw: str | None) -> list[tuple[str, str]]:
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        raise InvalidQuery("orderBy must be a JSON object")
    if not isinstance(parsed, dict):
        raise InvalidQuery("orderBy must be a JSON object")

    order_by = []
    for field, direction in parsed.items():
        if field not in ORDERABLE_FIELDS:
            raise InvalidQuery(f"Cannot order by {field!r}")
        direction = str(direction).lower()
        if direction not in SORT_DIRECTIONS:
            raise InvalidQuery(f"Sort direction must be asc or desc, got {direction!r}")
        order_by.append((field, direction))
    return order_by
