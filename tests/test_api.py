"""API endpoint tests."""

from fastapi import Request

from src.api.dependencies import CurrentPrincipal
from src.main import app
from src.services.tokens import Principal


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_login_create_flow(client, db):
    """Register, log in, create a record, and keep it away from another user."""
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/v1/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['token']}"}

    response = client.post(
        "/api/v1/exercise",
        headers=headers,
        json={"type": "Cycling", "duration": 60, "calories_burned": 500, "date": "2026-02-01"},
    )
    assert response.status_code == 201
    exercise = response.json()
    assert exercise["user_id"] == user_id

    client.post(
        "/api/v1/auth/register",
        json={"name": "B", "email": "b@x.com", "password": "secret2"},
    )
    token = client.post(
        "/api/v1/auth/login", json={"email": "b@x.com", "password": "secret2"}
    ).json()["token"]
    other = {"Authorization": f"Bearer {token}"}

    assert client.get("/api/v1/exercise", headers=other).json() == []
    assert client.get(f"/api/v1/exercise/{exercise['id']}", headers=other).status_code == 404
    assert client.get("/api/v1/exercise", headers=headers).json()[0]["id"] == exercise["id"]


def test_principal_attached_to_request(client, auth_headers):
    """The gate leaves the principal on request.state for the rest of the request."""
    seen = {}

    async def probe(request: Request, principal: CurrentPrincipal):
        seen["principal"] = principal
        seen["same"] = request.state.principal is principal
        return {}

    app.add_api_route("/api/v1/_probe", probe)
    try:
        response = client.get("/api/v1/_probe", headers=auth_headers)
    finally:
        app.router.routes.pop()

    assert response.status_code == 200
    assert seen["principal"] == Principal(id=auth_headers.user_id, email=auth_headers.email)
    assert seen["same"]
