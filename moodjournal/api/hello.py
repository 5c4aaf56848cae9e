"""Hello/Bye API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from moodjournal.db.session import get_db
from moodjournal.schemas.common import CommonResponse, Page, envelope
from moodjournal.schemas.hello import (
    ByeCreate,
    ByeResult,
    EmotionalStats,
    HelloCreate,
    HelloQuery,
    HelloResult,
    HelloUpdate,
    MoodChangeResult,
    parse_mood,
)
from moodjournal.services import hello_service

router = APIRouter(prefix="/hello", tags=["hello"])


@router.get("", response_model=CommonResponse[Page[HelloResult]])
def list_hellos(
    skip: int = Query(default=0),
    take: int | None = Query(default=None),
    ids: str | None = Query(default=None, description="Comma separated ids"),
    message: str | None = Query(default=None, description="Substring of the message"),
    mood_types: str | None = Query(default=None, alias="moodTypes", description="Comma separated moods"),
    order_by: str | None = Query(default=None, alias="orderBy", description='JSON, e.g. {"timestamp": "desc"}'),
    db: Session = Depends(get_db),
):
    query = HelloQuery.from_params(
        ids=ids,
        message=message,
        mood_types=mood_types,
        skip=skip,
        take=take,
        order_by=order_by,
    )
    return envelope(hello_service.list_hellos(db, query))


@router.post("", response_model=CommonResponse[HelloResult], status_code=status.HTTP_201_CREATED)
def add_hello(data: HelloCreate, db: Session = Depends(get_db)):
    """Record a Hello. Rejected with 409 when it would extend a same-mood run too far."""
    hello = hello_service.add_hello(db, data.message, data.mood)
    return envelope(hello, status_code=status.HTTP_201_CREATED)


# Fixed paths before /{hello_id}


@router.get("/stats", response_model=CommonResponse[EmotionalStats])
def get_emotional_stats(db: Session = Depends(get_db)):
    return envelope(hello_service.get_emotional_stats(db))


@router.get("/mood-change", response_model=CommonResponse[MoodChangeResult])
def analyze_mood_change(
    mood: str = Query(..., description="Mood to compare, case-insensitive"),
    db: Session = Depends(get_db),
):
    """How switching to ``mood`` now compares with the latest Hello."""
    return envelope(hello_service.analyze_mood_change(db, parse_mood(mood)))


@router.get("/happy", response_model=CommonResponse[Page[HelloResult]])
def find_happy_hellos(db: Session = Depends(get_db)):
    return envelope(hello_service.find_happy_hellos(db))


@router.get("/positive", response_model=CommonResponse[Page[HelloResult]])
def find_positive_hellos(db: Session = Depends(get_db)):
    return envelope(hello_service.find_positive_hellos(db))


@router.get("/{hello_id}", response_model=CommonResponse[HelloResult])
def get_hello(hello_id: int, db: Session = Depends(get_db)):
    return envelope(hello_service.get_hello_by_id(db, hello_id))


@router.patch("/{hello_id}", response_model=CommonResponse[HelloResult])
def update_hello(hello_id: int, data: HelloUpdate, db: Session = Depends(get_db)):
    return envelope(hello_service.update_hello(db, hello_id, message=data.message, mood=data.mood))


@router.delete("/{hello_id}", response_model=CommonResponse[None])
def delete_hello(hello_id: int, db: Session = Depends(get_db)):
    hello_service.delete_hello(db, hello_id)
    return envelope(None)


@router.get("/{hello_id}/matches", response_model=CommonResponse[list[HelloResult]])
def find_matching_hellos(hello_id: int, db: Session = Depends(get_db)):
    """Other Hellos sharing this one's mood."""
    return envelope(hello_service.find_matching_hellos(db, hello_id))


@router.post("/{hello_id}/byes", response_model=CommonResponse[ByeResult], status_code=status.HTTP_201_CREATED)
def add_bye(hello_id: int, data: ByeCreate, db: Session = Depends(get_db)):
    bye = hello_service.add_bye(
        db,
        hello_id,
        message=data.message,
        mood=data.mood,
        wave_count=data.wave_count,
    )
    return envelope(bye, status_code=status.HTTP_201_CREATED)


@router.post("/{hello_id}/auto-bye", response_model=CommonResponse[ByeResult], status_code=status.HTTP_201_CREATED)
def create_auto_bye(hello_id: int, db: Session = Depends(get_db)):
    """Wave goodbye the way the Hello's mood suggests."""
    bye = hello_service.create_auto_bye_response(db, hello_id)
    return envelope(bye, status_code=status.HTTP_201_CREATED)
