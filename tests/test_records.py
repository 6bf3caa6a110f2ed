"""Owned record API tests."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from src.models.exercise import Exercise

RESOURCES = [
    (
        "/api/v1/exercise",
        {"type": "Running", "duration": 30, "calories_burned": 300, "date": "2026-01-05"},
    ),
    (
        "/api/v1/nutrition",
        {"food_item": "Oatmeal", "calories_gained": 250, "date": "2026-01-05"},
    ),
    (
        "/api/v1/sleep",
        {"duration": 7.5, "quality": "good", "date": "2026-01-05"},
    ),
    (
        "/api/v1/capsule-reminders",
        {"name": "Vitamin D", "time": "08:30:00"},
    ),
    (
        "/api/v1/playlists",
        {"name": "Morning run"},
    ),
]


@pytest.mark.parametrize(("url", "payload"), RESOURCES)
def test_create_and_list(client, auth_headers, url, payload):
    response = client.post(url, headers=auth_headers, json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["user_id"] == auth_headers.user_id
    for key, value in payload.items():
        assert created[key] == value

    response = client.get(url, headers=auth_headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [created["id"]]


@pytest.mark.parametrize(("url", "payload"), RESOURCES)
def test_get_and_delete(client, auth_headers, url, payload):
    record_id = client.post(url, headers=auth_headers, json=payload).json()["id"]

    response = client.get(f"{url}/{record_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == record_id

    response = client.delete(f"{url}/{record_id}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"{url}/{record_id}", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.parametrize(("url", "payload"), RESOURCES)
def test_records_are_private(client, auth_headers, second_auth_headers, url, payload):
    """Another user can neither see nor delete a record."""
    record_id = client.post(url, headers=auth_headers, json=payload).json()["id"]

    assert client.get(url, headers=second_auth_headers).json() == []
    assert client.get(f"{url}/{record_id}", headers=second_auth_headers).status_code == 404
    assert client.delete(f"{url}/{record_id}", headers=second_auth_headers).status_code == 404

    # Still there for the owner
    assert client.get(f"{url}/{record_id}", headers=auth_headers).status_code == 200


@pytest.mark.parametrize(("url", "payload"), RESOURCES)
def test_requires_authentication(client, url, payload):
    assert client.get(url).status_code == 401
    assert client.post(url, json=payload).status_code == 401


def test_user_id_in_body_is_ignored(client, auth_headers, second_auth_headers):
    """Ownership always comes from the token."""
    response = client.post(
        "/api/v1/exercise",
        headers=auth_headers,
        json={
            "type": "Rowing",
            "duration": 20,
            "date": "2026-01-05",
            "user_id": second_auth_headers.user_id,
        },
    )
    assert response.status_code == 201
    assert response.json()["user_id"] == auth_headers.user_id


def test_create_exercise_validation(client, auth_headers):
    response = client.post(
        "/api/v1/exercise",
        headers=auth_headers,
        json={"type": "Running", "duration": -5, "date": "not-a-date"},
    )
    assert response.status_code == 400
    assert {e["field"] for e in response.json()["errors"]} == {"duration", "date"}


def test_create_exercise_store_error(client, db, auth_headers):
    failure = OperationalError("INSERT INTO exercises", {}, Exception("connection lost"))
    with patch.object(db, "commit", side_effect=failure):
        response = client.post(
            "/api/v1/exercise",
            headers=auth_headers,
            json={"type": "Running", "duration": 30, "date": "2026-01-05"},
        )

    assert response.status_code == 500
    assert response.json() == {"error": "Error adding exercise"}
    assert db.query(Exercise).count() == 0


def test_list_nutrition_store_error(client, db, auth_headers):
    failure = OperationalError("SELECT", {}, Exception("connection lost"))
    with patch.object(db, "query", side_effect=failure):
        response = client.get("/api/v1/nutrition", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Error fetching nutrition data"}


@pytest.fixture
def playlist_id(client, auth_headers):
    response = client.post("/api/v1/playlists", headers=auth_headers, json={"name": "Focus"})
    return response.json()["id"]


def test_add_track(client, auth_headers, playlist_id):
    response = client.post(
        "/api/v1/tracks",
        headers=auth_headers,
        json={
            "playlist_id": playlist_id,
            "title": "Clair de Lune",
            "artist": "Debussy",
            "duration": 300,
            "file_path": "/music/clair.mp3",
        },
    )
    assert response.status_code == 201
    track = response.json()
    assert track["playlist_id"] == playlist_id

    response = client.get(f"/api/v1/playlists/{playlist_id}/tracks", headers=auth_headers)
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [track["id"]]

    response = client.get(f"/api/v1/tracks/{track['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["title"] == "Clair de Lune"


def test_add_track_to_someone_elses_playlist(client, second_auth_headers, playlist_id):
    response = client.post(
        "/api/v1/tracks",
        headers=second_auth_headers,
        json={"playlist_id": playlist_id, "title": "Intruder"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Playlist not found"}


def test_add_track_to_missing_playlist(client, auth_headers):
    response = client.post(
        "/api/v1/tracks",
        headers=auth_headers,
        json={"playlist_id": 999999, "title": "Nowhere"},
    )
    assert response.status_code == 404


def test_tracks_are_private(client, auth_headers, second_auth_headers, playlist_id):
    """Tracks are owned through their playlist."""
    track_id = client.post(
        "/api/v1/tracks",
        headers=auth_headers,
        json={"playlist_id": playlist_id, "title": "Mine"},
    ).json()["id"]

    url = f"/api/v1/playlists/{playlist_id}/tracks"
    assert client.get(url, headers=second_auth_headers).status_code == 404
    assert client.get(f"/api/v1/tracks/{track_id}", headers=second_auth_headers).status_code == 404
    response = client.delete(f"/api/v1/tracks/{track_id}", headers=second_auth_headers)
    assert response.status_code == 404

    assert client.delete(f"/api/v1/tracks/{track_id}", headers=auth_headers).status_code == 204
    assert client.get(url, headers=auth_headers).json() == []


def test_delete_playlist_removes_tracks(client, auth_headers, playlist_id):
    track_id = client.post(
        "/api/v1/tracks",
        headers=auth_headers,
        json={"playlist_id": playlist_id, "title": "Gone soon"},
    ).json()["id"]

    response = client.delete(f"/api/v1/playlists/{playlist_id}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/tracks/{track_id}", headers=auth_headers).status_code == 404
