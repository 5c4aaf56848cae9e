"""Page arithmetic shared by every listing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from moodjournal.core.errors import DivisionGuard
from moodjournal.schemas.common import Page, PaginationMeta

T = TypeVar("T")


def check_page_bounds(skip: int, take: int) -> None:
    if take == 0:
        raise DivisionGuard("take must be greater than 0")
    if take < 0 or skip < 0:
        raise DivisionGuard(f"skip and take must not be negative (skip={skip}, take={take})")


def paginate(items: Sequence[T], skip: int, take: int, total_count: int) -> Page[T]:
    """Wrap ``items`` with page metadata.

    ``total_count`` may come from a separate read than ``items`` and can be
    stale; the arithmetic only requires it to be non-negative.
    """
    check_page_bounds(skip, take)
    current_page = skip // take + 1
    total_pages = -(-max(total_count, 0) // take)
    return Page(
        items=list(items),
        pagination=PaginationMeta(
            total_count=total_count,
            skip=skip,
            take=take,
            current_page=current_page,
            total_pages=total_pages,
            has_previous_page=current_page > 1,
            has_next_page=current_page < total_pages,
        ),
    )
