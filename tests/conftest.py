"""
Pytest fixtures and configuration for all tests.

Services get an in-memory FakeGameDataSource instead of MongoDB.
"""

import pytest

from app.models.round import EliminationLogEntry, ResolvedRound
from app.models.user import UserIdentity
from app.services.cache_service import CacheService
from tests.fakes import FakeGameDataSource


@pytest.fixture
def sample_users():
    """Three players with wallets."""
    return [
        UserIdentity(id="u1", wallet_address="GAAA1111"),
        UserIdentity(id="u2", wallet_address="GBBB2222"),
        UserIdentity(id="u3", wallet_address="GCCC3333"),
    ]


@pytest.fixture
def sample_rounds():
    """
    Two resolved rounds in two arenas.

    Arena 1: u1 beats u2 (u2 eliminated), u1 gets 210.
    Arena 2: u1 beats u3 (u3 eliminated), u1 gets 105.
    """
    return [
        ResolvedRound(arena_id="arena1", metadata={
            "playerChoices": [
                {"userId": "u1", "choice": "HIGH", "stake": 100},
                {"userId": "u2", "choice": "LOW", "stake": 100},
            ],
            "resolution": {
                "eliminatedPlayers": ["u2"],
                "payouts": [{"userId": "u1", "amount": 210}],
            },
        }),
        ResolvedRound(arena_id="arena2", metadata={
            "playerChoices": [
                {"userId": "u1", "choice": "HIGH", "stake": 50},
                {"userId": "u3", "choice": "LOW", "stake": 50},
            ],
            "resolution": {
                "eliminatedPlayers": ["u3"],
                "payouts": [{"userId": "u1", "amount": 105}],
            },
        }),
    ]


@pytest.fixture
def sample_eliminations():
    return [
        EliminationLogEntry(user_id="u2", round_id="r1", arena_id="arena1"),
        EliminationLogEntry(user_id="u3", round_id="r2", arena_id="arena2"),
    ]


@pytest.fixture
def game_data(sample_rounds, sample_eliminations, sample_users):
    """Fake data source loaded with the two-arena scenario."""
    return FakeGameDataSource(
        rounds=sample_rounds,
        eliminations=sample_eliminations,
        users=sample_users,
    )


@pytest.fixture
def empty_game_data():
    return FakeGameDataSource()


@pytest.fixture
def failing_game_data():
    return FakeGameDataSource(fail=True)


@pytest.fixture
def cache():
    """Fresh, enabled cache per test."""
    return CacheService(enabled=True, default_ttl=30)
