"""Mood journal policy constants."""

from __future__ import annotations

# Maximum number of consecutive Hellos allowed to share the same mood
MAX_CONSECUTIVE_SAME_MOOD = 3

# A Bye waving more than this many times counts as enthusiastic
ENTHUSIASTIC_WAVE_THRESHOLD = 3

# How many same-mood Hellos to return as matches
MATCHING_HELLOS_LIMIT = 5

# Rows fetched per round trip while scanning all Hellos for stats
STATS_BATCH_SIZE = 500

# Page size used when a listing request does not provide one
DEFAULT_TAKE = 50
