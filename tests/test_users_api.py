"""Integration tests for the user administration endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

USERS_URL = "/api/admin/users"


def _role_id(client: TestClient, headers: dict[str, str], alias: str) -> int:
    response = client.get("/api/admin/roles", headers=headers)
    assert response.status_code == 200
    return next(role["id"] for role in response.json() if role["alias"] == alias)


def test_user_crud_flow(client: TestClient, admin_headers) -> None:
    """Exercise the full CRUD lifecycle for users."""

    create_response = client.post(
        USERS_URL,
        json={
            "name": "Test User",
            "email": "user@example.com",
            "password": "Secret123",
            "avatar": "https://cdn.example.com/u.png",
        },
        headers=admin_headers,
    )
    assert create_response.status_code == 201
    created = create_response.json()
    user_id = created["id"]
    assert created["role"]["alias"] == "user"
    assert created["isActive"] is True

    list_response = client.get(USERS_URL, headers=admin_headers)
    assert list_response.status_code == 200
    assert {user["email"] for user in list_response.json()} == {
        "admin@example.com",
        "user@example.com",
    }

    admin_role_id = _role_id(client, admin_headers, "admin")
    update_response = client.put(
        f"{USERS_URL}/{user_id}",
        json={"name": "Updated User", "roleId": admin_role_id, "avatar": None},
        headers=admin_headers,
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["name"] == "Updated User"
    assert updated["role"]["alias"] == "admin"
    assert updated["avatar"] is None
    assert updated["updatedAt"] is not None

    delete_response = client.delete(f"{USERS_URL}/{user_id}", headers=admin_headers)
    assert delete_response.status_code == 204

    not_found = client.get(f"{USERS_URL}/{user_id}", headers=admin_headers)
    assert not_found.status_code == 404
    assert not_found.json()["detail"] == "Usuario no encontrado"


def test_duplicate_email_is_rejected(client: TestClient, admin_headers) -> None:
    response = client.post(
        USERS_URL,
        json={"name": "Copy", "email": "ADMIN@example.com", "password": "Secret123"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "El correo electrónico ya está registrado"


def test_unknown_role_is_rejected(client: TestClient, admin_headers) -> None:
    response = client.post(
        USERS_URL,
        json={
            "name": "Nobody",
            "email": "nobody@example.com",
            "password": "Secret123",
            "roleId": 999,
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Rol no encontrado"


def test_update_unknown_user_returns_404(client: TestClient, admin_headers) -> None:
    response = client.put(
        f"{USERS_URL}/999", json={"name": "Ghost"}, headers=admin_headers
    )

    assert response.status_code == 404


def test_update_rejects_unknown_fields(client: TestClient, admin_headers, make_user) -> None:
    user = make_user(email="visitor@example.com")

    response = client.put(
        f"{USERS_URL}/{user.id}", json={"nickname": "vis"}, headers=admin_headers
    )

    assert response.status_code == 422


def test_admin_cannot_delete_itself(client: TestClient, admin_headers) -> None:
    users = client.get(USERS_URL, headers=admin_headers).json()
    admin_id = next(user["id"] for user in users if user["email"] == "admin@example.com")

    response = client.delete(f"{USERS_URL}/{admin_id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "No puedes eliminar tu propio usuario"


def test_visitors_cannot_manage_users(client: TestClient, make_user, login) -> None:
    make_user(email="visitor@example.com")
    headers = login("visitor@example.com")

    assert client.get(USERS_URL, headers=headers).status_code == 403
    assert client.get(USERS_URL).status_code == 401
