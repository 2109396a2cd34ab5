from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs.

    This makes REDIS_URL available to the env-gated Redis tests without
    exporting it in your shell. In CI we don't auto-load `.env`, so those
    tests stay skipped unless explicitly opted-in with
    GAMESTATE_LOAD_DOTENV_FOR_TESTS=1.
    """

    if os.environ.get("CI") and os.environ.get("GAMESTATE_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture(autouse=True)
def _fresh_default_map() -> None:
    """Each test gets its own default game map (ids restart at 0, no values)."""

    from gamestate.default import reset_game_map_for_tests

    reset_game_map_for_tests()


@pytest.fixture()
def fake_redis():
    import fakeredis

    return fakeredis.FakeRedis(decode_responses=True)
