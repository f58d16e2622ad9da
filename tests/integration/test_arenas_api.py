"""
Integration tests for arena stats and health endpoints
"""

import pytest

from app.models.arena import Arena
from app.models.round import EliminationLogEntry, Round
from tests.fakes import FakeGameDataSource


@pytest.fixture
def data_source():
    return FakeGameDataSource(
        arenas=[Arena(id="arena1", metadata={"minStake": 25})],
        arena_rounds=[
            Round(id="r1", arena_id="arena1", round_number=1, state="RESOLVED", metadata={
                "playerChoices": [{"userId": "u1", "stake": 25}, {"userId": "u2", "stake": 25}],
                "oracleYield": 3.5,
            }),
        ],
        eliminations=[EliminationLogEntry(user_id="u2", round_id="r1", arena_id="arena1")],
    )


class TestArenasEndpoints:
    """Test suite for /api/arenas endpoints."""

    @pytest.mark.asyncio
    async def test_get_arena_stats(self, client):
        response = await client.get("/api/arenas/arena1/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["arenaId"] == "arena1"
        assert data["playerCount"] == 2
        assert data["survivorCount"] == 1
        assert data["currentRound"] == 1
        assert data["currentPot"] == 50
        assert data["entryFee"] == 25
        assert data["yieldAccrued"] == 3.5
        assert data["status"] == "resolved"
        assert "lastUpdated" in data

    @pytest.mark.asyncio
    async def test_get_arena_stats_not_found(self, client, cache):
        response = await client.get("/api/arenas/missing/stats")

        assert response.status_code == 404
        assert cache.get_stats()["size"] == 0

    @pytest.mark.asyncio
    async def test_arena_stats_are_cached(self, client, data_source):
        first = (await client.get("/api/arenas/arena1/stats")).json()
        data_source.arena_rounds = []
        second = (await client.get("/api/arenas/arena1/stats")).json()

        assert second == first


class TestHealthEndpoint:
    """Test suite for /health and /."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] in ["connected", "disconnected"]
        assert data["cache_entries"] == 0

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"
