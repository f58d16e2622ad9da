"""
Integration tests for the leaderboard endpoint
"""

import pytest

from app.models.round import ResolvedRound
from app.models.user import UserIdentity
from app.services.cursor import encode_cursor
from tests.fakes import FakeGameDataSource


class TestLeaderboardEndpoint:
    """Test suite for GET /api/leaderboard."""

    @pytest.mark.asyncio
    async def test_ranked_players(self, client):
        response = await client.get("/api/leaderboard")

        assert response.status_code == 200
        data = response.json()
        assert data["nextCursor"] is None
        assert len(data["players"]) == 3

        top = data["players"][0]
        assert top == {
            "id": "u1",
            "rank": 1,
            "walletAddress": "GAAA1111",
            "totalYield": 315,
            "arenasWon": 2,
            "survivalStreak": 2,
        }
        others = {p["id"]: p for p in data["players"][1:]}
        assert set(others) == {"u2", "u3"}
        assert all(p["totalYield"] == 0 and p["arenasWon"] == 0 for p in others.values())

    @pytest.mark.asyncio
    async def test_cursor_pagination(self, client):
        first = (await client.get("/api/leaderboard", params={"limit": 2})).json()

        assert [p["rank"] for p in first["players"]] == [1, 2]
        assert first["nextCursor"] is not None

        second = (await client.get(
            "/api/leaderboard",
            params={"limit": 2, "cursor": first["nextCursor"]}
        )).json()

        assert [p["rank"] for p in second["players"]] == [3]
        assert second["nextCursor"] is None

    @pytest.mark.asyncio
    async def test_invalid_cursor_returns_first_page(self, client):
        response = await client.get("/api/leaderboard", params={"limit": 1, "cursor": "***"})

        assert response.status_code == 200
        assert response.json()["players"][0]["rank"] == 1

    @pytest.mark.asyncio
    async def test_cursor_past_end(self, client):
        response = await client.get("/api/leaderboard", params={"cursor": encode_cursor(50)})

        assert response.status_code == 200
        assert response.json() == {"players": [], "nextCursor": None}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", ["0", "101", "-5", "abc", "2.5"])
    async def test_invalid_limit_is_rejected(self, client, limit):
        response = await client.get("/api/leaderboard", params={"limit": limit})

        assert response.status_code == 422
        issues = response.json()["detail"]
        assert any(issue["loc"] == ["query", "limit"] for issue in issues)

    @pytest.mark.asyncio
    async def test_limit_bounds_accepted(self, client):
        assert (await client.get("/api/leaderboard", params={"limit": 1})).status_code == 200
        assert (await client.get("/api/leaderboard", params={"limit": 100})).status_code == 200

    @pytest.mark.asyncio
    async def test_default_limit_is_20(self, client, data_source):
        # 25 payout-only players on top of the three from the scenario
        data_source.rounds.append(ResolvedRound(arena_id="bonus", metadata={
            "resolution": {"payouts": [{"userId": f"p{i:02d}", "amount": i + 1} for i in range(25)]},
        }))
        data_source.users.extend(UserIdentity(id=f"p{i:02d}", wallet_address=f"W{i}") for i in range(25))

        data = (await client.get("/api/leaderboard")).json()

        assert len(data["players"]) == 20
        assert data["nextCursor"] is not None

    @pytest.mark.asyncio
    async def test_responses_are_cached_per_page(self, client, data_source, cache):
        await client.get("/api/leaderboard", params={"limit": 2})
        await client.get("/api/leaderboard", params={"limit": 2})
        assert data_source.round_reads == 1

        # Otra página = otra key
        await client.get("/api/leaderboard", params={"limit": 3})
        assert data_source.round_reads == 2

        await cache.invalidate_leaderboard()
        await client.get("/api/leaderboard", params={"limit": 2})
        assert data_source.round_reads == 3

    @pytest.mark.asyncio
    async def test_junk_cursors_share_the_first_page_entry(self, client, data_source, cache):
        for i in range(50):
            response = await client.get("/api/leaderboard", params={"limit": 2, "cursor": f"junk{i}"})
            assert response.status_code == 200

        await client.get("/api/leaderboard", params={"limit": 2, "cursor": encode_cursor(0)})

        assert data_source.round_reads == 1
        assert cache.get_stats()["size"] == 1


class TestEmptyLeaderboard:
    """Leaderboard with no game activity."""

    @pytest.fixture
    def data_source(self):
        return FakeGameDataSource()

    @pytest.mark.asyncio
    async def test_empty(self, client):
        response = await client.get("/api/leaderboard")

        assert response.status_code == 200
        assert response.json() == {"players": [], "nextCursor": None}


class TestLeaderboardUpstreamFailure:
    """Storage unavailable: the whole request fails, nothing partial."""

    @pytest.fixture
    def data_source(self):
        return FakeGameDataSource(fail=True)

    @pytest.mark.asyncio
    async def test_returns_503(self, client, cache):
        response = await client.get("/api/leaderboard")

        assert response.status_code == 503
        assert "detail" in response.json()
        assert cache.get_stats()["size"] == 0
