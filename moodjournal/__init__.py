"""moodjournal: a small mood-journal service (Hello/Bye records)."""

__version__ = "0.1.0"
