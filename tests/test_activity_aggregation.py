"""Tests for merging the event collections into the admin activity feed."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from discovery.application.use_cases.activity import (
    ActivityFetchError,
    get_user_activity,
)
from discovery.application.use_cases.users import delete_user
from discovery.domain.entities import ActivityFilter, ActivityKind, TimeRange
from discovery.infrastructure.models import (
    FavoriteModel,
    PageViewModel,
    PlaceModel,
    ReservationModel,
    SearchHistoryModel,
    UserSessionModel,
)
from discovery.infrastructure.repositories import ActivityRepository
from discovery.utils import now_in_app_naive_datetime


@pytest.fixture()
def now():
    return now_in_app_naive_datetime().replace(microsecond=0)


@pytest.fixture()
def visitor(make_user):
    return make_user(
        email="ana@example.com", name="Ana", avatar="https://cdn.example.com/ana.png"
    )


def _add_place(db_session, name: str = "Café Central") -> int:
    place = PlaceModel(name=name, latitude=40.4, longitude=-3.7)
    db_session.add(place)
    db_session.commit()
    return place.id


def _add_search(db_session, user_id, timestamp, query: str = "pizza") -> int:
    event = SearchHistoryModel(user_id=user_id, query=query, timestamp=timestamp)
    db_session.add(event)
    db_session.commit()
    return event.id


def _add_page_view(db_session, user_id, timestamp, path: str = "/places") -> int:
    event = PageViewModel(user_id=user_id, path=path, duration=12, timestamp=timestamp)
    db_session.add(event)
    db_session.commit()
    return event.id


def _add_reservation(db_session, user_id, place_id, created_at) -> int:
    event = ReservationModel(
        user_id=user_id,
        place_id=place_id,
        date=created_at + timedelta(days=2),
        guests=4,
        status="pending",
        created_at=created_at,
    )
    db_session.add(event)
    db_session.commit()
    return event.id


def _add_favorite(db_session, user_id, place_id, created_at) -> None:
    db_session.add(FavoriteModel(user_id=user_id, place_id=place_id, created_at=created_at))
    db_session.commit()


def _add_session(db_session, user_id, start_time, end_time=None) -> None:
    db_session.add(
        UserSessionModel(user_id=user_id, start_time=start_time, end_time=end_time)
    )
    db_session.commit()


def _populate(db_session, user_id, now) -> None:
    place_id = _add_place(db_session)
    _add_search(db_session, user_id, now - timedelta(minutes=10))
    _add_page_view(db_session, user_id, now - timedelta(minutes=20))
    _add_reservation(db_session, user_id, place_id, now - timedelta(minutes=30))
    _add_favorite(db_session, user_id, place_id, now - timedelta(minutes=40))
    _add_session(db_session, user_id, now - timedelta(minutes=50))


def test_empty_store_returns_empty_feed(db_session, now) -> None:
    feed = get_user_activity(db_session, reference=now)

    assert feed.activities == ()
    assert feed.active_users == 0
    assert (feed.stats.page_views, feed.stats.searches, feed.stats.reservations) == (0, 0, 0)
    assert feed.date_from == now - timedelta(days=1)
    assert feed.generated_at == now


def test_window_excludes_older_events(db_session, visitor, now) -> None:
    _add_search(db_session, visitor.id, now - timedelta(minutes=30))
    _add_page_view(db_session, visitor.id, now - timedelta(minutes=90))

    feed = get_user_activity(db_session, time_range=TimeRange.LAST_HOUR, reference=now)

    assert [record.action for record in feed.activities] == ["Search"]
    assert feed.stats.searches == 1
    assert feed.stats.page_views == 0
    assert feed.date_from == now - timedelta(hours=1)


def test_all_kinds_are_normalized_and_sorted(db_session, visitor, now) -> None:
    _populate(db_session, visitor.id, now)

    feed = get_user_activity(db_session, reference=now)

    assert [record.action for record in feed.activities] == [
        "Search",
        "Page View",
        "Reservation",
        "Added Favorite",
    ]
    timestamps = [record.timestamp for record in feed.activities]
    assert timestamps == sorted(timestamps, reverse=True)
    assert all(record.timestamp >= feed.date_from for record in feed.activities)

    search, page_view, reservation, favorite = feed.activities
    assert search.details == {"query": "pizza"}
    assert page_view.details == {"path": "/places", "duration": 12}
    assert reservation.details["place"] == "Café Central"
    assert reservation.details["guests"] == 4
    assert reservation.details["status"] == "pending"
    assert favorite.details == {"place": "Café Central"}

    assert search.user is not None
    assert search.user.name == "Ana"
    assert search.user.email == "ana@example.com"
    assert search.user.avatar == "https://cdn.example.com/ana.png"
    assert feed.active_users == 1
    assert (feed.stats.page_views, feed.stats.searches, feed.stats.reservations) == (1, 1, 1)


@pytest.mark.parametrize(
    ("activity_filter", "action"),
    [
        (ActivityFilter.SEARCHES, "Search"),
        (ActivityFilter.PAGE_VIEWS, "Page View"),
        (ActivityFilter.RESERVATIONS, "Reservation"),
        (ActivityFilter.FAVORITES, "Added Favorite"),
    ],
)
def test_filter_narrows_feed_but_not_counters(
    db_session, visitor, now, activity_filter, action
) -> None:
    _populate(db_session, visitor.id, now)

    unfiltered = get_user_activity(db_session, reference=now)
    filtered = get_user_activity(db_session, activity_filter=activity_filter, reference=now)

    assert [record.action for record in filtered.activities] == [action]
    assert filtered.stats == unfiltered.stats
    assert filtered.active_users == unfiltered.active_users


def test_anonymous_events_have_no_user(db_session, now) -> None:
    _add_search(db_session, None, now - timedelta(minutes=1), query="museos")

    (record,) = get_user_activity(db_session, reference=now).activities

    assert record.user_id is None
    assert record.user is None
    assert record.details == {"query": "museos"}


def test_deleted_user_keeps_raw_id(db_session, visitor, now) -> None:
    _add_search(db_session, visitor.id, now - timedelta(minutes=1), query="tapas")
    _add_page_view(db_session, visitor.id, now - timedelta(minutes=2))

    delete_user(db_session, visitor.id)
    feed = get_user_activity(db_session, reference=now)

    assert [record.kind for record in feed.activities] == [
        ActivityKind.SEARCH,
        ActivityKind.PAGE_VIEW,
    ]
    for record in feed.activities:
        assert record.user is None
        assert record.user_id == visitor.id


def test_ids_stay_unique_across_kinds(db_session, visitor, now) -> None:
    place_id = _add_place(db_session)
    search_id = _add_search(db_session, visitor.id, now - timedelta(minutes=1))
    page_view_id = _add_page_view(db_session, visitor.id, now - timedelta(minutes=2))
    _add_favorite(db_session, visitor.id, place_id, now - timedelta(minutes=3))

    ids = [record.id for record in get_user_activity(db_session, reference=now).activities]

    assert search_id == page_view_id == 1
    assert ids == ["search_1", "pageview_1", f"favorite_{visitor.id}_{place_id}"]


def test_each_kind_is_capped(db_session, visitor, now) -> None:
    for index in range(60):
        _add_search(db_session, visitor.id, now - timedelta(seconds=index), query=f"q{index}")
    for index in range(35):
        place_id = _add_place(db_session, name=f"Lugar {index}")
        _add_favorite(db_session, visitor.id, place_id, now - timedelta(seconds=index))

    feed = get_user_activity(db_session, reference=now)
    kinds = [record.kind for record in feed.activities]

    assert kinds.count(ActivityKind.SEARCH) == 50
    assert kinds.count(ActivityKind.FAVORITE) == 30
    assert len(feed.activities) <= 50 + 50 + 30 + 30
    # The newest events are the ones kept.
    assert feed.activities[0].details == {"query": "q0"}
    assert feed.stats.searches == 60


def test_only_open_sessions_in_window_are_active(db_session, make_user, now) -> None:
    first = make_user(email="first@example.com")
    second = make_user(email="second@example.com")
    third = make_user(email="third@example.com")
    _add_session(db_session, first.id, now - timedelta(minutes=5))
    _add_session(
        db_session, second.id, now - timedelta(minutes=5), end_time=now - timedelta(minutes=1)
    )
    _add_session(db_session, third.id, now - timedelta(days=3))

    feed = get_user_activity(db_session, reference=now)

    assert feed.active_users == 1


def test_identical_requests_return_identical_feeds(db_session, visitor, now) -> None:
    _populate(db_session, visitor.id, now)
    _add_search(db_session, visitor.id, now - timedelta(minutes=10), query="tapas")

    first = get_user_activity(db_session, reference=now)
    second = get_user_activity(db_session, reference=now)

    assert first == second


def test_query_failure_raises_fetch_error(db_session, visitor, now, monkeypatch) -> None:
    _populate(db_session, visitor.id, now)

    def _fail(self, since):
        raise OperationalError("SELECT count(*)", {}, Exception("database is locked"))

    monkeypatch.setattr(ActivityRepository, "count_open_sessions", _fail)

    with pytest.raises(ActivityFetchError, match="Failed to fetch user activity"):
        get_user_activity(db_session, reference=now)
