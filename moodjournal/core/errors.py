"""Domain errors raised by the mood journal core.

Routers never catch these themselves; the handlers registered in
``moodjournal.main`` turn them into the response envelope.
"""

from __future__ import annotations


class MoodJournalError(Exception):
    """Base class for every error the core raises on purpose."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PolicyViolation(MoodJournalError):
    """A command would break the sequential-mood rule."""

    status_code = 409


class NotFound(MoodJournalError):
    """A referenced Hello or Bye does not exist."""

    status_code = 404


class DivisionGuard(MoodJournalError):
    """Pagination was asked for a page size it cannot divide by."""

    status_code = 400


class InvalidQuery(MoodJournalError):
    """A listing query could not be parsed."""

    status_code = 400
