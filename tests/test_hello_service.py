"""Hello/Bye service tests."""

import pytest

from moodjournal.core.config import settings
from moodjournal.core.errors import DivisionGuard, NotFound, PolicyViolation
from moodjournal.core.mood import ENCOURAGEMENT_SUFFIX, Mood, farewell_message
from moodjournal.schemas.hello import HelloQuery
from moodjournal.services import hello_repository as repo
from moodjournal.services import hello_service


def test_add_hello_enhances_negative_message(db):
    result = hello_service.add_hello(db, "I'm tired", Mood.SLEEPY)
    assert result.message == "I'm tired" + ENCOURAGEMENT_SUFFIX
    assert result.byes == []
    assert result.byes_count == 0
    assert result.total_wave_count == 0
    assert result.is_positive_mood is False


def test_add_hello_keeps_positive_message(db):
    result = hello_service.add_hello(db, "Great day", Mood.HAPPY)
    assert result.message == "Great day"
    assert result.is_positive_mood is True


def test_fourth_same_mood_hello_is_rejected(db):
    for i in range(3):
        hello_service.add_hello(db, f"yay {i}", Mood.HAPPY)

    with pytest.raises(PolicyViolation):
        hello_service.add_hello(db, "yay again", Mood.HAPPY)

    result = hello_service.add_hello(db, "woo", Mood.EXCITED)
    assert result.mood is Mood.EXCITED


def test_update_does_not_reenhance(db):
    created = hello_service.add_hello(db, "meh", Mood.HUNGRY)
    updated = hello_service.update_hello(db, created.id, mood=Mood.SLEEPY)
    assert updated.message == created.message
    assert updated.message.count(ENCOURAGEMENT_SUFFIX) == 1
    assert updated.mood is Mood.SLEEPY


def test_update_and_delete_missing_hello(db):
    with pytest.raises(NotFound):
        hello_service.update_hello(db, 999, message="x")
    with pytest.raises(NotFound):
        hello_service.delete_hello(db, 999)


def test_delete_removes_hello_and_byes(db):
    hello = hello_service.add_hello(db, "bye soon", Mood.EXCITED)
    hello_service.create_auto_bye_response(db, hello.id)
    hello_service.delete_hello(db, hello.id)

    with pytest.raises(NotFound):
        hello_service.get_hello_by_id(db, hello.id)
    assert hello_service.list_hellos(db, HelloQuery()).pagination.total_count == 0


def test_get_hello_by_id_not_found(db):
    with pytest.raises(NotFound):
        hello_service.get_hello_by_id(db, 42)


def test_list_hellos_filters_and_pages(db):
    for mood, message in [
        (Mood.HAPPY, "sunny walk"),
        (Mood.SLEEPY, "long night"),
        (Mood.HAPPY, "sunny lunch"),
        (Mood.HUNGRY, "need pizza"),
        (Mood.EXCITED, "concert"),
    ]:
        repo.create_hello(db, message, mood)

    page = hello_service.list_hellos(db, HelloQuery(moods=[Mood.HAPPY, Mood.EXCITED], take=2))
    assert [h.message for h in page.items] == ["sunny walk", "sunny lunch"]
    assert page.pagination.total_count == 3
    assert page.pagination.total_pages == 2
    assert page.pagination.has_next_page is True

    page = hello_service.list_hellos(db, HelloQuery(message="sunny", order_by=[("id", "desc")]))
    assert [h.message for h in page.items] == ["sunny lunch", "sunny walk"]
    assert page.pagination.take == settings.default_take

    page = hello_service.list_hellos(db, HelloQuery(ids=[1, 4], skip=1, take=1))
    assert [h.id for h in page.items] == [4]
    assert page.pagination.current_page == 2
    assert page.pagination.has_previous_page is True


def test_list_hellos_take_zero(db):
    with pytest.raises(DivisionGuard):
        hello_service.list_hellos(db, HelloQuery(take=0))


def test_happy_and_positive_shortcuts(db):
    repo.create_hello(db, "a", Mood.HAPPY)
    repo.create_hello(db, "b", Mood.EXCITED)
    repo.create_hello(db, "c", Mood.SLEEPY)

    assert [h.message for h in hello_service.find_happy_hellos(db).items] == ["a"]
    assert [h.message for h in hello_service.find_positive_hellos(db).items] == ["a", "b"]


def test_emotional_stats_scan_all_batches(db, monkeypatch):
    monkeypatch.setattr(settings, "stats_batch_size", 2)
    for mood in [Mood.HAPPY, Mood.HAPPY, Mood.SLEEPY, Mood.HUNGRY, Mood.EXCITED]:
        repo.create_hello(db, "entry", mood)
    hello_service.create_auto_bye_response(db, 1)
    hello_service.create_auto_bye_response(db, 3)

    stats = hello_service.get_emotional_stats(db)
    assert stats.total_hellos == 5
    assert stats.mood_distribution[Mood.HAPPY] == 2
    assert stats.most_frequent_mood is Mood.HAPPY
    assert stats.average_bye_response_rate == pytest.approx(0.4)
    assert stats.positive_mood_percentage == pytest.approx(60.0)
    assert stats.negative_mood_percentage == pytest.approx(40.0)


def test_emotional_stats_empty(db):
    stats = hello_service.get_emotional_stats(db)
    assert stats.total_hellos == 0
    assert stats.most_frequent_mood is Mood.HAPPY


def test_analyze_mood_change_without_history(db):
    result = hello_service.analyze_mood_change(db, Mood.HAPPY)
    assert result.previous_mood is None
    assert result.is_improving is False
    assert result.is_worsening is False
    assert result.consecutive_same_mood_count == 0


def test_analyze_mood_change_uses_newest_hello(db):
    repo.create_hello(db, "zzz", Mood.SLEEPY)
    repo.create_hello(db, "zzz", Mood.SLEEPY)

    result = hello_service.analyze_mood_change(db, Mood.HAPPY)
    assert result.previous_mood is Mood.SLEEPY
    assert result.is_improving is True

    result = hello_service.analyze_mood_change(db, Mood.SLEEPY)
    assert result.consecutive_same_mood_count == 2
    assert "sleepy" in result.suggestion


def test_find_matching_hellos_excludes_target(db):
    target = repo.create_hello(db, "target", Mood.HUNGRY)
    for i in range(7):
        repo.create_hello(db, f"snack {i}", Mood.HUNGRY)
    repo.create_hello(db, "nap", Mood.SLEEPY)

    matches = hello_service.find_matching_hellos(db, target.id)
    assert len(matches) == settings.matching_hellos_limit
    assert target.id not in [m.id for m in matches]
    assert all(m.mood is Mood.HUNGRY for m in matches)
    assert matches[0].message == "snack 6"


def test_find_matching_hellos_missing(db):
    with pytest.raises(NotFound):
        hello_service.find_matching_hellos(db, 1)


def test_auto_bye_for_hungry_hello(db):
    hello = repo.create_hello(db, "lunch?", Mood.HUNGRY)
    bye = hello_service.create_auto_bye_response(db, hello.id)
    assert bye.wave_count == 2
    assert bye.message == farewell_message(Mood.HUNGRY)
    assert bye.mood is Mood.HUNGRY
    assert bye.is_enthusiastic is False

    result = hello_service.get_hello_by_id(db, hello.id)
    assert result.byes_count == 1
    assert result.total_wave_count == 2


def test_auto_bye_missing_hello(db):
    with pytest.raises(NotFound):
        hello_service.create_auto_bye_response(db, 5)


def test_add_bye_defaults_and_overrides(db):
    hello = repo.create_hello(db, "party", Mood.EXCITED)

    bye = hello_service.add_bye(db, hello.id)
    assert bye.wave_count == 5
    assert bye.is_enthusiastic is True

    bye = hello_service.add_bye(db, hello.id, message="later", mood=Mood.SLEEPY, wave_count=3)
    assert (bye.message, bye.mood, bye.wave_count) == ("later", Mood.SLEEPY, 3)
    assert bye.is_enthusiastic is False

    result = hello_service.get_hello_by_id(db, hello.id)
    assert result.byes_count == 2
    assert result.total_wave_count == 8


def test_get_hello_or_raise(db):
    hello = repo.create_hello(db, "hey", Mood.HAPPY)
    assert repo.get_hello_or_raise(db, hello.id).id == hello.id
    with pytest.raises(NotFound):
        repo.get_hello_or_raise(db, hello.id + 1)
