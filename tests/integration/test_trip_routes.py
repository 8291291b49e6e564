"""HTTP tests for the trip endpoints, with database and mail client overridden."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from app.core.config import settings
from app.core.database import get_db
from app.core.mail_client import get_mail_client
from app.main import app


@pytest.fixture
async def client(session_factory, mail, monkeypatch):
    monkeypatch.setattr(settings, "API_BASE_URL", "http://api.test")
    monkeypatch.setattr(settings, "WEB_BASE_URL", "http://web.test")

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_client] = lambda: mail

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def _trip_body(**overrides):
    starts_at = datetime.now(timezone.utc) + timedelta(days=1)
    body = {
        "destination": "Paris",
        "starts_at": starts_at.isoformat(),
        "ends_at": (starts_at + timedelta(days=5)).isoformat(),
        "owner_name": "Ana",
        "owner_email": "ana@x.com",
        "emails_to_invite": ["bob@x.com", "cleo@x.com"],
    }
    body.update(overrides)
    return body


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_paris_scenario(client, mail):
    response = await client.post("/trips", json=_trip_body())
    assert response.status_code == 200
    trip_id = response.json()["tripId"]
    assert mail.recipients == ["ana@x.com"]

    mail.sent.clear()
    response = await client.get(f"/trips/{trip_id}/confirm")
    assert response.status_code == 302
    assert response.headers["location"] == f"http://web.test/trips/{trip_id}"
    assert sorted(mail.recipients) == ["bob@x.com", "cleo@x.com"]

    mail.sent.clear()
    response = await client.get(f"/trips/{trip_id}/confirm")
    assert response.status_code == 302
    assert response.headers["location"] == "/"
    assert mail.sent == []


async def test_create_trip_in_the_past_is_rejected(client, mail):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    response = await client.post(
        "/trips",
        json=_trip_body(starts_at=past.isoformat(), ends_at=(past + timedelta(days=3)).isoformat()),
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "starts_at must be in the future"}
    assert mail.sent == []


async def test_create_trip_with_end_before_start_is_rejected(client):
    starts_at = datetime.now(timezone.utc) + timedelta(days=3)
    response = await client.post(
        "/trips",
        json=_trip_body(starts_at=starts_at.isoformat(), ends_at=(starts_at - timedelta(days=1)).isoformat()),
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "ends_at must be after starts_at"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"destination": "Rio"},
        {"owner_email": "nope"},
        {"emails_to_invite": ["bob@x.com", "nope"]},
    ],
)
async def test_create_trip_with_malformed_body_is_rejected(client, overrides):
    response = await client.post("/trips", json=_trip_body(**overrides))
    assert response.status_code == 422


async def test_confirm_unknown_trip_returns_404(client):
    response = await client.get("/trips/missing-trip/confirm")

    assert response.status_code == 404
    assert response.json() == {"detail": "Trip not found"}


async def test_invite_participant(client, mail):
    trip_id = (await client.post("/trips", json=_trip_body())).json()["tripId"]
    mail.sent.clear()

    response = await client.post(f"/trips/{trip_id}/invites", json={"email": "dan@x.com"})

    assert response.status_code == 200
    assert response.json()["participantId"]
    assert mail.recipients == ["dan@x.com"]
    assert f"http://api.test/trips/{trip_id}/confirm" in mail.sent[0][2]


async def test_invite_to_unknown_trip_returns_404(client, mail):
    response = await client.post("/trips/missing-trip/invites", json={"email": "dan@x.com"})

    assert response.status_code == 404
    assert mail.sent == []


async def test_invite_with_malformed_email_is_rejected(client):
    trip_id = (await client.post("/trips", json=_trip_body())).json()["tripId"]

    response = await client.post(f"/trips/{trip_id}/invites", json={"email": "nope"})

    assert response.status_code == 422


async def test_create_trip_requires_invitee_list(client):
    body = _trip_body()
    del body["emails_to_invite"]

    response = await client.post("/trips", json=body)

    assert response.status_code == 422


async def test_non_ascii_invite_email_is_rejected(client, mail):
    trip_id = (await client.post("/trips", json=_trip_body())).json()["tripId"]
    mail.sent.clear()

    response = await client.post(f"/trips/{trip_id}/invites", json={"email": "josé@x.com"})

    assert response.status_code == 400
    assert mail.sent == []
