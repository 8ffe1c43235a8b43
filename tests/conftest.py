"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import Any

import pytest

from mention_tracker.lookup.player_lookup import PlayerLookup


@pytest.fixture
def roster() -> dict[str, list[dict[str, Any]]]:
    return {
        "Arsenal": [
            {"name": "Martin Ødegaard", "position": "Midfielder", "league": "Premier League"},
            {"name": "Bukayo Saka", "position": "Forward", "league": "Premier League"},
            {"name": "Myles Lewis-Skelly", "position": "Defender", "league": "Premier League"},
            {"name": "Declan Rice", "position": "Midfielder", "league": "Premier League"},
        ],
        "Manchester City": [
            {"name": "Rico Lewis", "position": "Defender", "league": "Premier League"},
            {"name": "Erling Haaland", "position": "Forward", "league": "Premier League"},
            {"name": "Rodri", "position": "Midfielder", "league": "Premier League"},
        ],
        "Liverpool": [
            {"name": "John Smith", "position": "Defender", "league": "Premier League"},
            {"name": "Mark Smith", "position": "Forward", "league": "Premier League"},
            {"name": "Jon Ham", "position": "Goalkeeper", "league": "Premier League"},
        ],
    }


@pytest.fixture
async def lookup(roster: dict[str, list[dict[str, Any]]]) -> PlayerLookup:
    player_lookup = PlayerLookup()
    await player_lookup.initialize(roster)
    return player_lookup
