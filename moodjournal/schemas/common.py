"""Response envelope and pagination schemas shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serialises as camelCase, accepts camelCase or snake_case."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class CommonResponse(CamelModel, Generic[T]):
    status_code: int
    data: T | None = None
    message: str | None = None


class PaginationMeta(CamelModel):
    total_count: int
    skip: int
    take: int
    current_page: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool


class Page(CamelModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta


def envelope(data: T, status_code: int = 200, message: str | None = None) -> CommonResponse[T]:
    """Wrap a successful result the same way errors are wrapped."""
    return CommonResponse(status_code=status_code, data=data, message=message)
