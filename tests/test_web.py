"""Tests for the web API."""

import random
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from habit_forge.web import create_app


@pytest.fixture
def client(temp_db_path, clock):
    app = create_app(db_path=temp_db_path, clock=clock, rng=random.Random(5))
    with TestClient(app) as test_client:
        yield test_client


def register(client):
    response = client.post(
        "/account/register",
        data={"name": "runner01", "email": "runner@example.com", "password": "secret"},
    )
    assert response.status_code == 200


class TestAccountRoutes:
    """Tests for /account."""

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_register_and_summary(self, client):
        register(client)

        data = client.get("/account").json()
        assert data["profile"]["login_name"] == "runner01"
        assert data["profile"]["balance"] == 0
        assert data["days"]["total_days"] == 0

    def test_register_validation_error(self, client):
        response = client.post(
            "/account/register",
            data={"name": "abc", "email": "runner@example.com", "password": "secret"},
        )
        assert response.status_code == 422
        assert response.json()["code"] == "validation"

    def test_login_failure(self, client):
        register(client)
        client.post("/account/logout")

        response = client.post(
            "/account/login", data={"identifier": "runner01", "password": "nope"}
        )
        assert response.status_code == 401

    def test_topup(self, client):
        register(client)
        response = client.post("/account/topup", data={"amount": 1000})
        assert response.json()["balance"] == 1000


class TestChallengeRoutes:
    """Tests for /challenges."""

    def test_create_list_and_stats(self, client):
        response = client.post(
            "/challenges",
            data={"exercise": "Push-ups", "target": "12", "sets": "10", "per_week": "4", "stake": "500"},
        )
        assert response.status_code == 200
        challenge_id = response.json()["id"]

        listing = client.get("/challenges", params={"filter": "active"}).json()
        assert listing["total_count"] == 1
        assert listing["items"][0]["id"] == challenge_id

        client.post(f"/challenges/{challenge_id}/status", data={"status": "success"})
        stats = client.get("/challenges/stats").json()
        assert stats["success"] == 1
        assert stats["success_percent"] == 100

    def test_invalid_challenge(self, client):
        response = client.post(
            "/challenges",
            data={"exercise": "Push-ups", "target": "12", "sets": "20"},
        )
        assert response.status_code == 422
        assert response.json()["code"] == "validation"

    def test_delete_window(self, client, clock):
        created = client.post(
            "/challenges", data={"exercise": "Plank", "target": "30", "sets": "3"}
        ).json()

        clock.advance(hours=12)
        response = client.delete(f"/challenges/{created['id']}")
        assert response.status_code == 409
        assert response.json()["code"] == "window_expired"

    def test_unknown_challenge(self, client):
        assert client.get("/challenges/missing").status_code == 404


class TestGroupRoutes:
    """Tests for /group."""

    def test_join_requires_funds(self, client):
        register(client)
        response = client.post("/group/join")
        assert response.status_code == 409
        assert response.json()["code"] == "insufficient_funds"

    def test_join_cycle_finalize(self, client, clock):
        register(client)
        client.post("/account/topup", data={"amount": 1000})

        joined = client.post("/group/join").json()
        assert joined["balance"] == 500
        ann = client.post("/group/join", data={"nickname": "Ann"}).json()["participant"]
        assert client.post("/group/join", data={"nickname": "ann"}).json()["code"] == "duplicate_name"

        cycled = client.post(f"/group/participants/{ann['id']}/cycle").json()
        assert cycled["participant"]["status"] == "success"

        early = client.post("/group/finalize")
        assert early.status_code == 409
        assert early.json()["code"] == "week_not_ended"

        clock.set(datetime(2026, 10, 26, 8, 0))
        done = client.post("/group/finalize").json()
        assert done == {"outcome": "success", "balance": 1000}

        week = client.get("/group").json()
        assert week["state"] == "finalized"
        assert week["prize_pool"] == 2500
        assert week["payout_per_winner"] == 1250

    def test_reset(self, client):
        register(client)
        client.post("/account/topup", data={"amount": 500})
        client.post("/group/join")

        week = client.post("/group/reset").json()
        assert week["participants"] == []
        assert week["is_joined"] is False


class TestHabitRoutes:
    """Tests for /habits."""

    def test_add_and_increment(self, client):
        habit = client.post("/habits", data={"title": "Read"}).json()
        result = client.post(f"/habits/{habit['id']}/increment").json()

        assert result["habit"]["progress"] == 1
        assert result["done_days"] == 1
        assert len(client.get("/habits").json()["habits"]) == 1
