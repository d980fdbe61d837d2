"""Integration tests for the activity endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from discovery.infrastructure.models import PageViewModel, SearchHistoryModel
from discovery.infrastructure.repositories import ActivityRepository
from discovery.utils import now_in_app_naive_datetime

ACTIVITY_URL = "/api/admin/user-activity"


def test_requires_authentication(client: TestClient) -> None:
    response = client.get(ACTIVITY_URL)

    assert response.status_code == 401


def test_requires_admin_role(client: TestClient, make_user, login) -> None:
    make_user(email="visitor@example.com")
    headers = login("visitor@example.com")

    response = client.get(ACTIVITY_URL, headers=headers)

    assert response.status_code == 403


def test_returns_feed_with_defaults(client: TestClient, admin_headers, db_session) -> None:
    now = now_in_app_naive_datetime()
    db_session.add(
        SearchHistoryModel(user_id=None, query="parques", timestamp=now - timedelta(minutes=5))
    )
    db_session.add(
        PageViewModel(
            user_id=None, path="/map", duration=3, timestamp=now - timedelta(minutes=2)
        )
    )
    db_session.commit()

    response = client.get(ACTIVITY_URL, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["filter"] == "all"
    assert body["timeRange"] == "24h"
    # The admin login opened a session inside the window.
    assert body["activeUsers"] == 1
    assert body["stats"] == {"pageViews": 1, "searches": 1, "reservations": 0}
    assert [item["id"] for item in body["activities"]] == ["pageview_1", "search_1"]

    page_view = body["activities"][0]
    assert page_view["kind"] == "pageview"
    assert page_view["action"] == "Page View"
    assert page_view["user"] is None
    assert page_view["details"] == {"path": "/map", "duration": 3}

    date_from = datetime.fromisoformat(body["dateFrom"])
    generated_at = datetime.fromisoformat(body["generatedAt"])
    assert generated_at - date_from == timedelta(days=1)


def test_filter_and_time_range_are_applied(
    client: TestClient, admin_headers, db_session
) -> None:
    now = now_in_app_naive_datetime()
    db_session.add(
        SearchHistoryModel(user_id=None, query="playa", timestamp=now - timedelta(minutes=30))
    )
    db_session.add(
        PageViewModel(user_id=None, path="/", duration=1, timestamp=now - timedelta(minutes=90))
    )
    db_session.commit()

    response = client.get(
        ACTIVITY_URL,
        params={"filter": "pageViews", "timeRange": "1h"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["activities"] == []
    assert body["stats"]["searches"] == 1
    assert body["stats"]["pageViews"] == 0


@pytest.mark.parametrize(
    ("params", "message"),
    [
        ({"filter": "clicks"}, "Invalid filter"),
        ({"timeRange": "2h"}, "Invalid timeRange"),
    ],
)
def test_invalid_parameters_are_rejected(
    client: TestClient, admin_headers, params, message
) -> None:
    response = client.get(ACTIVITY_URL, params=params, headers=admin_headers)

    assert response.status_code == 400
    assert message in response.json()["error"]


def test_query_failure_returns_generic_error(
    client: TestClient, admin_headers, monkeypatch
) -> None:
    def _fail(self, kind, since, limit):
        raise OperationalError("SELECT", {}, Exception("no such table"))

    monkeypatch.setattr(ActivityRepository, "list_recent", _fail)

    response = client.get(ACTIVITY_URL, headers=admin_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch user activity"}


def test_page_views_are_recorded_for_anonymous_and_signed_in_visitors(
    client: TestClient, make_user, login, db_session
) -> None:
    anonymous = client.post("/api/activity/page-views", json={"path": "/", "duration": 4})
    assert anonymous.status_code == 201
    assert anonymous.json()["success"] is True

    user = make_user(email="visitor@example.com")
    headers = login("visitor@example.com")
    signed_in = client.post(
        "/api/activity/page-views",
        json={"path": "/places/3", "duration": 20},
        headers=headers,
    )
    assert signed_in.status_code == 201

    views = db_session.query(PageViewModel).order_by(PageViewModel.id).all()
    assert [(view.user_id, view.path) for view in views] == [(None, "/"), (user.id, "/places/3")]


def test_page_view_with_relative_path_is_rejected(client: TestClient) -> None:
    response = client.post("/api/activity/page-views", json={"path": "places"})

    assert response.status_code == 400
    assert "error" in response.json()
