"""Integration tests for browsing and administering the place catalog."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from discovery.infrastructure.models import SearchHistoryModel


@pytest.fixture()
def catalog(client: TestClient, admin_headers) -> dict[str, int]:
    """Create a small catalog through the admin endpoints."""

    category = client.post(
        "/api/admin/categories/add",
        json={"name": "Restaurantes", "icon": "utensils", "color": "#f97316", "isTrending": True},
        headers=admin_headers,
    )
    assert category.status_code == 201, category.text
    category_id = category.json()["category"]["id"]

    subcategory = client.post(
        "/api/admin/subcategories/add",
        json={"categoryId": category_id, "name": "Italiana"},
        headers=admin_headers,
    )
    assert subcategory.status_code == 201, subcategory.text
    subcategory_id = subcategory.json()["subcategory"]["id"]

    feature = client.post(
        "/api/admin/features/add",
        json={"name": "Terraza", "icon": "sun"},
        headers=admin_headers,
    )
    assert feature.status_code == 201, feature.text
    feature_id = feature.json()["feature"]["id"]

    place = client.post(
        "/api/admin/places/add",
        json={
            "name": "Trattoria Roma",
            "description": "Pasta fresca",
            "address": "Calle Mayor 1",
            "latitude": 40.4168,
            "longitude": -3.7038,
            "cuisine": "Italiana",
            "priceLevel": 2,
            "rating": 4.5,
            "isFeatured": True,
            "categoryIds": [category_id],
            "subcategoryIds": [subcategory_id],
            "featureIds": [feature_id],
        },
        headers=admin_headers,
    )
    assert place.status_code == 201, place.text

    other = client.post(
        "/api/admin/places/add",
        json={"name": "Museo del Prado", "address": "Paseo del Prado"},
        headers=admin_headers,
    )
    assert other.status_code == 201, other.text

    return {
        "category_id": category_id,
        "subcategory_id": subcategory_id,
        "feature_id": feature_id,
        "place_id": place.json()["place"]["id"],
        "other_place_id": other.json()["place"]["id"],
    }


def test_public_categories_include_subcategories(client: TestClient, catalog) -> None:
    response = client.get("/api/categories")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    (category,) = body["categories"]
    assert category["name"] == "Restaurantes"
    assert category["isTrending"] is True
    assert [sub["name"] for sub in category["subcategories"]] == ["Italiana"]

    detail = client.get(f"/api/categories/{catalog['category_id']}")
    assert detail.status_code == 200
    assert detail.json()["category"]["id"] == catalog["category_id"]

    assert client.get("/api/categories/999").status_code == 404


def test_public_place_detail_has_coordinates_and_links(client: TestClient, catalog) -> None:
    response = client.get(f"/api/places/{catalog['place_id']}")

    assert response.status_code == 200
    place = response.json()["place"]
    assert place["latitude"] == pytest.approx(40.4168)
    assert place["longitude"] == pytest.approx(-3.7038)
    assert [item["name"] for item in place["categories"]] == ["Restaurantes"]
    assert [item["name"] for item in place["subcategories"]] == ["Italiana"]
    assert [item["name"] for item in place["features"]] == ["Terraza"]

    assert client.get("/api/places/999").status_code == 404


def test_place_listing_filters(client: TestClient, catalog) -> None:
    everything = client.get("/api/places").json()["places"]
    assert [place["name"] for place in everything] == ["Museo del Prado", "Trattoria Roma"]

    by_text = client.get("/api/places", params={"search": "pasta"}).json()["places"]
    assert [place["name"] for place in by_text] == ["Trattoria Roma"]

    by_category = client.get(
        "/api/places", params={"categoryId": catalog["category_id"]}
    ).json()["places"]
    assert [place["name"] for place in by_category] == ["Trattoria Roma"]

    featured = client.get("/api/places", params={"featured": "true"}).json()["places"]
    assert [place["name"] for place in featured] == ["Trattoria Roma"]

    limited = client.get("/api/places", params={"limit": 1}).json()["places"]
    assert len(limited) == 1


def test_search_matches_wildcards_literally(
    client: TestClient, admin_headers, catalog
) -> None:
    created = client.post(
        "/api/admin/places/add",
        json={"name": "Bar 100% Natural", "address": "Calle Luna 3"},
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text

    def names(search: str) -> list[str]:
        response = client.get("/api/places", params={"search": search})
        return [place["name"] for place in response.json()["places"]]

    assert names("%") == ["Bar 100% Natural"]
    assert names("0% n") == ["Bar 100% Natural"]
    assert names("_") == []
    assert names("del_prado") == []


def test_searches_are_recorded_for_signed_in_users_only(
    client: TestClient, catalog, make_user, login, db_session
) -> None:
    client.get("/api/places", params={"search": "museo"})

    user = make_user(email="visitor@example.com")
    headers = login("visitor@example.com")
    client.get("/api/places", params={"search": "  museo  "}, headers=headers)
    client.get("/api/places", params={"search": ""}, headers=headers)

    searches = db_session.query(SearchHistoryModel).all()
    assert [(search.user_id, search.query) for search in searches] == [(user.id, "museo")]


def test_admin_updates_place_and_links(client: TestClient, admin_headers, catalog) -> None:
    url = f"/api/admin/places/{catalog['place_id']}"

    response = client.put(
        url, json={"rating": 4.8, "featureIds": []}, headers=admin_headers
    )

    assert response.status_code == 200
    place = response.json()["place"]
    assert place["rating"] == pytest.approx(4.8)
    assert place["features"] == []
    # Omitted link lists are kept.
    assert [item["name"] for item in place["categories"]] == ["Restaurantes"]
    assert place["name"] == "Trattoria Roma"


def test_admin_place_validation(client: TestClient, admin_headers, catalog) -> None:
    unknown_category = client.post(
        "/api/admin/places/add",
        json={"name": "Sin categoría", "categoryIds": [999]},
        headers=admin_headers,
    )
    assert unknown_category.status_code == 400
    assert "999" in unknown_category.json()["detail"]

    half_coordinates = client.post(
        "/api/admin/places/add",
        json={"name": "Solo latitud", "latitude": 10},
        headers=admin_headers,
    )
    assert half_coordinates.status_code == 400

    missing = client.put(
        "/api/admin/places/999", json={"name": "Nada"}, headers=admin_headers
    )
    assert missing.status_code == 404


def test_admin_deletes_catalog_entries(client: TestClient, admin_headers, catalog) -> None:
    assert (
        client.delete(
            f"/api/admin/places/{catalog['other_place_id']}", headers=admin_headers
        ).status_code
        == 204
    )
    assert (
        client.delete(
            f"/api/admin/features/{catalog['feature_id']}", headers=admin_headers
        ).status_code
        == 204
    )
    assert (
        client.delete(
            f"/api/admin/subcategories/{catalog['subcategory_id']}", headers=admin_headers
        ).status_code
        == 204
    )
    assert (
        client.delete(
            f"/api/admin/categories/{catalog['category_id']}", headers=admin_headers
        ).status_code
        == 204
    )

    remaining = client.get("/api/admin/places", headers=admin_headers).json()["places"]
    assert [place["name"] for place in remaining] == ["Trattoria Roma"]
    assert remaining[0]["categories"] == []
    assert remaining[0]["features"] == []

    assert (
        client.delete("/api/admin/categories/999", headers=admin_headers).status_code == 404
    )


def test_admin_category_names_are_unique(client: TestClient, admin_headers, catalog) -> None:
    duplicate = client.post(
        "/api/admin/categories/add", json={"name": "Restaurantes"}, headers=admin_headers
    )
    assert duplicate.status_code == 400

    renamed = client.put(
        f"/api/admin/categories/{catalog['category_id']}",
        json={"name": "Gastronomía"},
        headers=admin_headers,
    )
    assert renamed.status_code == 200
    assert renamed.json()["category"]["name"] == "Gastronomía"

    features = client.get("/api/admin/features", headers=admin_headers).json()["features"]
    assert [feature["name"] for feature in features] == ["Terraza"]

    subcategories = client.get(
        "/api/admin/subcategories",
        params={"categoryId": catalog["category_id"]},
        headers=admin_headers,
    ).json()["subcategories"]
    assert [item["name"] for item in subcategories] == ["Italiana"]


def test_catalog_admin_requires_admin(client: TestClient, make_user, login) -> None:
    make_user(email="visitor@example.com")
    headers = login("visitor@example.com")

    response = client.post(
        "/api/admin/categories/add", json={"name": "Bares"}, headers=headers
    )

    assert response.status_code == 403
