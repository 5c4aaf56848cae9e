"""Bye model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moodjournal.core.mood import Mood
from moodjournal.db.base import Base

if TYPE_CHECKING:
    from moodjournal.models.hello import Hello


class Bye(Base):
    """A farewell attached to exactly one Hello."""

    __tablename__ = "byes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    hello_id: Mapped[int] = mapped_column(ForeignKey("hellos.id", ondelete="CASCADE"), nullable=False, index=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[Mood] = mapped_column(Enum(Mood, name="mood_type"), nullable=False)
    wave_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    hello: Mapped[Hello] = relationship(back_populates="byes")
