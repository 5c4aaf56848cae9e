"""SQLAlchemy models."""

from __future__ import annotations

from moodjournal.models.bye import Bye
from moodjournal.models.hello import Hello

__all__ = [
    "Hello",
    "Bye",
]
