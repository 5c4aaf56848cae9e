"""ORM rows to result schemas, with the derived fields computed on every read."""

from __future__ import annotations

from collections.abc import Iterable

from moodjournal.core.config import settings
from moodjournal.core.mood import is_positive
from moodjournal.models.bye import Bye
from moodjournal.models.hello import Hello
from moodjournal.schemas.hello import ByeResult, HelloResult


def to_bye_result(bye: Bye, enthusiastic_threshold: int | None = None) -> ByeResult:
    threshold = settings.enthusiastic_wave_threshold if enthusiastic_threshold is None else enthusiastic_threshold
    return ByeResult(
        id=bye.id,
        message=bye.message,
        mood=bye.mood,
        wave_count=bye.wave_count,
        is_enthusiastic=bye.wave_count > threshold,
    )


def to_hello_result(hello: Hello, enthusiastic_threshold: int | None = None) -> HelloResult:
    byes = [to_bye_result(bye, enthusiastic_threshold) for bye in hello.byes]
    return HelloResult(
        id=hello.id,
        message=hello.message,
        mood=hello.mood,
        timestamp=hello.timestamp,
        byes=byes,
        byes_count=len(byes),
        total_wave_count=sum(bye.wave_count for bye in byes),
        is_positive_mood=is_positive(hello.mood),
    )


def to_hello_results(hellos: Iterable[Hello]) -> list[HelloResult]:
    return [to_hello_result(hello) for hello in hellos]
