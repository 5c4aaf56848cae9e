"""Sequential mood rule: no more than K Hellos in a row with the same mood."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from moodjournal.core.errors import PolicyViolation
from moodjournal.core.mood import Mood
from moodjournal.services.hello_repository import find_recent_hellos

logger = logging.getLogger(__name__)


def count_consecutive_same_mood(recent_moods: Iterable[Mood], mood: Mood) -> int:
    """Length of the run of ``mood`` at the head of ``recent_moods`` (newest first)."""
    count = 0
    for recent in recent_moods:
        if recent != mood:
            break
        count += 1
    return count


def assert_mood_allowed(db: Session, mood: Mood, max_run: int) -> None:
    """Raise PolicyViolation if the ``max_run`` newest Hellos all have ``mood``.

    Check-then-act: two concurrent creations with the same mood can both pass.
    Writers that need a hard guarantee must serialise externally.
    """
    recent = find_recent_hellos(db, max_run)
    run = count_consecutive_same_mood((hello.mood for hello in recent), mood)
    if run >= max_run:
        logger.warning("mood_run_rejected mood=%s run=%s max_run=%s", mood.value, run, max_run)
        raise PolicyViolation(
            f"Cannot record more than {max_run} consecutive Hellos with mood {mood.value}"
        )
