"""Hello model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moodjournal.core.mood import Mood
from moodjournal.db.base import Base

if TYPE_CHECKING:
    from moodjournal.models.bye import Bye


class Hello(Base):
    """A mood journal entry: a message and the mood it was written in."""

    __tablename__ = "hellos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[Mood] = mapped_column(Enum(Mood, name="mood_type"), nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    byes: Mapped[list[Bye]] = relationship(
        back_populates="hello",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Bye.id",
    )
