"""Hello/Bye business logic.

Sequences the mood rule, message enhancement, persistence and the derived
insights (stats, mood change, matches, auto-generated Byes).
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from moodjournal.core.config import settings
from moodjournal.core.mood import (
    POSITIVE_MOODS,
    Mood,
    enhance_message,
    farewell_message,
    optimal_wave_count,
)
from moodjournal.schemas.common import Page
from moodjournal.schemas.hello import ByeResult, EmotionalStats, HelloQuery, HelloResult, MoodChangeResult
from moodjournal.services import hello_repository as repo
from moodjournal.services.analytics import compute_stats
from moodjournal.services.hello_mapper import to_bye_result, to_hello_result, to_hello_results
from moodjournal.services.mood_transition import analyze_transition
from moodjournal.services.mood_validator import assert_mood_allowed, count_consecutive_same_mood
from moodjournal.services.pagination import check_page_bounds, paginate

logger = logging.getLogger(__name__)


def add_hello(db: Session, message: str, mood: Mood) -> HelloResult:
    """Record a new Hello if the sequential mood rule allows it."""
    assert_mood_allowed(db, mood, settings.max_consecutive_same_mood)
    # Enhancement happens here and only here; updates keep the message as given.
    hello = repo.create_hello(db, enhance_message(mood, message), mood)
    logger.info("hello_created id=%s mood=%s", hello.id, mood.value)
    return to_hello_result(hello)


def list_hellos(db: Session, query: HelloQuery) -> Page[HelloResult]:
    take = settings.default_take if query.take is None else query.take
    check_page_bounds(query.skip, take)
    hellos, total_count = repo.find_hellos(
        db,
        ids=query.ids,
        message_contains=query.message,
        moods=query.moods,
        skip=query.skip,
        take=take,
        order_by=query.order_by,
    )
    return paginate(to_hello_results(hellos), query.skip, take, total_count)


def get_hello_by_id(db: Session, hello_id: int) -> HelloResult:
    return to_hello_result(repo.get_hello_or_raise(db, hello_id))


def update_hello(db: Session, hello_id: int, *, message: str | None = None, mood: Mood | None = None) -> HelloResult:
    hello = repo.update_hello(db, hello_id, message=message, mood=mood)
    logger.info("hello_updated id=%s", hello_id)
    return to_hello_result(hello)


def delete_hello(db: Session, hello_id: int) -> None:
    repo.delete_hello(db, hello_id)
    logger.info("hello_deleted id=%s", hello_id)


def find_happy_hellos(db: Session) -> Page[HelloResult]:
    return list_hellos(db, HelloQuery(moods=[Mood.HAPPY]))


def find_positive_hellos(db: Session) -> Page[HelloResult]:
    return list_hellos(db, HelloQuery(moods=[mood for mood in Mood if mood in POSITIVE_MOODS]))


def get_emotional_stats(db: Session) -> EmotionalStats:
    """Stats over every Hello, streamed from the store in batches."""
    return compute_stats(repo.iter_hellos(db, settings.stats_batch_size))


def analyze_mood_change(db: Session, new_mood: Mood) -> MoodChangeResult:
    recent = repo.find_recent_hellos(db, settings.max_consecutive_same_mood)
    previous_mood = recent[0].mood if recent else None
    run = count_consecutive_same_mood((hello.mood for hello in recent), new_mood)
    return analyze_transition(previous_mood, new_mood, run)


def find_matching_hellos(db: Session, hello_id: int) -> list[HelloResult]:
    """Other Hellos written in the same mood, newest first."""
    target = repo.get_hello_or_raise(db, hello_id)
    matches = repo.find_hellos_by_mood(
        db,
        target.mood,
        exclude_id=target.id,
        limit=settings.matching_hellos_limit,
    )
    return to_hello_results(matches)


def add_bye(
    db: Session,
    hello_id: int,
    *,
    message: str | None = None,
    mood: Mood | None = None,
    wave_count: int | None = None,
) -> ByeResult:
    """Attach a Bye; anything not given is derived from the Hello's mood."""
    hello = repo.get_hello_or_raise(db, hello_id)
    mood = mood or hello.mood
    bye = repo.create_bye(
        db,
        hello_id,
        message=message if message is not None else farewell_message(mood),
        mood=mood,
        wave_count=wave_count if wave_count is not None else optimal_wave_count(mood),
    )
    logger.info("bye_created id=%s hello_id=%s wave_count=%s", bye.id, hello_id, bye.wave_count)
    return to_bye_result(bye)


def create_auto_bye_response(db: Session, hello_id: int) -> ByeResult:
    """Persist the Bye a Hello's mood calls for."""
    hello = repo.get_hello_or_raise(db, hello_id)
    bye = repo.create_bye(
        db,
        hello.id,
        message=farewell_message(hello.mood),
        mood=hello.mood,
        wave_count=optimal_wave_count(hello.mood),
    )
    logger.info("auto_bye_created id=%s hello_id=%s mood=%s", bye.id, hello_id, hello.mood.value)
    return to_bye_result(bye)
