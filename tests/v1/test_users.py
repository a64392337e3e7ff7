"""Tests for user account endpoints."""

from __future__ import annotations

import uuid

from fastapi import status

from lodge_chat.models import User
from tests.conftest import STRONG_PASSWORD


def test_register_user_success(client, db_session) -> None:
    """Registration returns the public projection of the new user."""
    response = client.post(
        "/user", json={"displayName": "Ada", "password": STRONG_PASSWORD}
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()

    assert uuid.UUID(data["id"])
    assert data["displayName"] == "Ada"
    assert data["pronouns"] == ""
    assert data["description"] == ""
    assert data["admin"] is False
    assert isinstance(data["joinDate"], int)
    assert "password" not in data


def test_register_missing_display_name(client) -> None:
    response = client.post("/user", json={"password": STRONG_PASSWORD})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "400",
        "message": "bad request: displayName not present",
    }


def test_register_long_display_name_creates_nothing(client, db_session) -> None:
    response = client.post(
        "/user", json={"displayName": "x" * 33, "password": STRONG_PASSWORD}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert db_session.query(User).count() == 0


def test_register_weak_password(client) -> None:
    response = client.post("/user", json={"displayName": "Ada", "password": "password"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "bad request: password too weak"


def test_get_me(client, test_user, auth_token) -> None:
    response = client.get("/user", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == str(test_user.id)


def test_get_me_without_token(client) -> None:
    response = client.get("/user")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {
        "error": "401",
        "message": "unauthorized: invalid token provided (Authorization header)",
    }


def test_get_me_with_unknown_token(client, test_user) -> None:
    response = client.get("/user", headers={"Authorization": "x" * 128})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_bearer_prefix_is_not_stripped(client, auth_token) -> None:
    response = client.get("/user", headers={"Authorization": f"Bearer {auth_token['Authorization']}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_get_self_by_id(client, test_user, auth_token) -> None:
    response = client.get(f"/user/{test_user.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["displayName"] == "Ada"


def test_get_other_user_forbidden(client, other_user, auth_token) -> None:
    response = client.get(f"/user/{other_user.id}", headers=auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["message"] == "forbidden: attempted to access non-self user"


def test_update_profile_partial(client, test_user, auth_token) -> None:
    response = client.put("/user", json={"pronouns": "she/her"}, headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["pronouns"] == "she/her"
    assert data["displayName"] == "Ada"
    assert data["id"] == str(test_user.id)


def test_update_profile_rejects_long_pronouns(client, auth_token) -> None:
    response = client.put("/user", json={"pronouns": "x" * 17}, headers=auth_token)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_profile_requires_token(client) -> None:
    response = client.put("/user", json={"pronouns": "they/them"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_reset_token(client, test_user, auth_token) -> None:
    old_headers = dict(auth_token)
    response = client.post("/user/reset", headers=old_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == str(test_user.id)
    assert len(data["token"]) == 128
    assert data["token"] != old_headers["Authorization"]

    assert client.get("/user", headers=old_headers).status_code == status.HTTP_401_UNAUTHORIZED
    assert client.get("/user", headers={"Authorization": data["token"]}).status_code == 200


def test_list_users(client, test_user, other_user) -> None:
    response = client.get("/users")
    assert response.status_code == status.HTTP_200_OK
    names = {user["displayName"] for user in response.json()}
    assert names == {"Ada", "Grace"}


def test_list_admins(client, db_session, test_user, other_user) -> None:
    other_user.admin = True
    db_session.commit()

    response = client.get("/admins")
    assert response.status_code == status.HTTP_200_OK
    assert [user["id"] for user in response.json()] == [str(other_user.id)]


def test_get_malformed_user_id_forbidden(client, auth_token) -> None:
    """Any id other than the caller's own is refused, even one that is not a UUID."""
    response = client.get("/user/someone-else", headers=auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {
        "error": "403",
        "message": "forbidden: attempted to access non-self user",
    }


def test_get_self_by_uppercase_id(client, test_user, auth_token) -> None:
    response = client.get(f"/user/{str(test_user.id).upper()}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == str(test_user.id)
