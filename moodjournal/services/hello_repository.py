"""Hello/Bye persistence.

Plain queries only; business rules live in ``hello_service``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session, selectinload

from moodjournal.core.errors import NotFound
from moodjournal.core.mood import Mood
from moodjournal.models.bye import Bye
from moodjournal.models.hello import Hello

_ORDER_COLUMNS = {
    "id": Hello.id,
    "message": Hello.message,
    "mood": Hello.mood,
    "timestamp": Hello.timestamp,
}


def _with_byes(stmt):
    return stmt.options(selectinload(Hello.byes))


def _newest_first(stmt):
    # Timestamps can collide within the same second; id breaks the tie.
    return stmt.order_by(desc(Hello.timestamp), desc(Hello.id))


def create_hello(db: Session, message: str, mood: Mood) -> Hello:
    hello = Hello(message=message, mood=mood)
    db.add(hello)
    db.commit()
    db.refresh(hello)
    return hello


def find_hello_by_id(db: Session, hello_id: int) -> Hello | None:
    return db.execute(_with_byes(select(Hello).where(Hello.id == hello_id))).scalar_one_or_none()


def get_hello_or_raise(db: Session, hello_id: int) -> Hello:
    hello = find_hello_by_id(db, hello_id)
    if not hello:
        raise NotFound(f"Hello {hello_id} not found")
    return hello


def find_hellos(
    db: Session,
    *,
    ids: Sequence[int] | None = None,
    message_contains: str | None = None,
    moods: Sequence[Mood] | None = None,
    skip: int = 0,
    take: int | None = None,
    order_by: Sequence[tuple[str, str]] = (),
) -> tuple[list[Hello], int]:
    """Return one page of Hellos and the total count for the same filter.

    The list and the count are two independent reads; the count may be stale
    relative to the list under concurrent writes.
    """
    conditions = []
    if ids:
        conditions.append(Hello.id.in_(ids))
    if message_contains:
        conditions.append(Hello.message.contains(message_contains, autoescape=True))
    if moods:
        conditions.append(Hello.mood.in_(moods))

    stmt = _with_byes(select(Hello).where(*conditions))
    for field, direction in order_by:
        column = _ORDER_COLUMNS[field]
        stmt = stmt.order_by(desc(column) if direction == "desc" else asc(column))
    stmt = stmt.order_by(asc(Hello.id))
    if skip:
        stmt = stmt.offset(skip)
    if take is not None:
        stmt = stmt.limit(take)

    items = list(db.execute(stmt).scalars().all())
    total_count = db.execute(select(func.count(Hello.id)).where(*conditions)).scalar_one()
    return items, total_count


def find_recent_hellos(db: Session, limit: int) -> list[Hello]:
    """The ``limit`` most recently created Hellos, newest first."""
    stmt = _newest_first(_with_byes(select(Hello))).limit(limit)
    return list(db.execute(stmt).scalars().all())


def find_hellos_by_mood(db: Session, mood: Mood, *, exclude_id: int | None = None, limit: int) -> list[Hello]:
    stmt = select(Hello).where(Hello.mood == mood)
    if exclude_id is not None:
        stmt = stmt.where(Hello.id != exclude_id)
    stmt = _newest_first(_with_byes(stmt)).limit(limit)
    return list(db.execute(stmt).scalars().all())


def iter_hellos(db: Session, batch_size: int) -> Iterator[Hello]:
    """Yield every Hello with its Byes, fetching ``batch_size`` rows at a time.

    Keyset pagination on id, so each batch is an independent query and the
    scan can be restarted by calling again.
    """
    last_id = 0
    while True:
        stmt = _with_byes(select(Hello).where(Hello.id > last_id)).order_by(asc(Hello.id)).limit(batch_size)
        batch = list(db.execute(stmt).scalars().all())
        if not batch:
            return
        yield from batch
        last_id = batch[-1].id
        if len(batch) < batch_size:
            return


def update_hello(db: Session, hello_id: int, *, message: str | None = None, mood: Mood | None = None) -> Hello:
    hello = get_hello_or_raise(db, hello_id)
    if message is not None:
        hello.message = message
    if mood is not None:
        hello.mood = mood
    db.commit()
    db.refresh(hello)
    return hello


def delete_hello(db: Session, hello_id: int) -> None:
    hello = get_hello_or_raise(db, hello_id)
    db.delete(hello)
    db.commit()


def create_bye(db: Session, hello_id: int, *, message: str, mood: Mood, wave_count: int) -> Bye:
    if db.get(Hello, hello_id) is None:
        raise NotFound(f"Hello {hello_id} not found")
    bye = Bye(hello_id=hello_id, message=message, mood=mood, wave_count=wave_count)
    db.add(bye)
    db.commit()
    db.refresh(bye)
    return bye
