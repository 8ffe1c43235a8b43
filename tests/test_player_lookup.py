import asyncio
from typing import Any

import pytest

from mention_tracker.lookup.index_builder import LoadError
from mention_tracker.lookup.player_lookup import PlayerLookup
from mention_tracker.models.enums import LookupState


class TestInitialize:
    async def test_ready_after_initialize(self, roster: dict[str, Any]) -> None:
        lookup = PlayerLookup()
        assert lookup.state == LookupState.NOT_LOADED

        await lookup.initialize(roster)

        assert lookup.state == LookupState.READY
        assert lookup.is_loaded

    async def test_accepts_async_loader(self, roster: dict[str, Any]) -> None:
        async def load() -> dict[str, Any]:
            return roster

        lookup = PlayerLookup()
        await lookup.initialize(load)
        assert [p.name for p in lookup.match("Saka again")] == ["Bukayo Saka"]

    async def test_concurrent_calls_share_one_load(self, roster: dict[str, Any]) -> None:
        calls = 0
        release = asyncio.Event()

        async def load() -> dict[str, Any]:
            nonlocal calls
            calls += 1
            await release.wait()
            return roster

        lookup = PlayerLookup()
        first = asyncio.ensure_future(lookup.initialize(load))
        second = asyncio.ensure_future(lookup.initialize(load))
        await asyncio.sleep(0)
        assert lookup.state == LookupState.LOADING
        assert lookup.match("Saka again") == []

        release.set()
        await asyncio.gather(first, second)

        assert calls == 1
        assert lookup.is_loaded

    async def test_idempotent_after_success(self, roster: dict[str, Any]) -> None:
        lookup = PlayerLookup()
        await lookup.initialize(roster)
        await lookup.initialize({"Other": [{"name": "Someone Else"}]})

        assert lookup.match("Else speaks") == []
        assert lookup.get_stats().unique_surname_key_count == 9

    async def test_loader_failure_is_wrapped(self) -> None:
        async def load() -> dict[str, Any]:
            raise FileNotFoundError("players-by-team.json")

        lookup = PlayerLookup()
        with pytest.raises(LoadError) as exc_info:
            await lookup.initialize(load)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert lookup.state == LookupState.FAILED

    async def test_failure_is_not_retried(self, roster: dict[str, Any]) -> None:
        lookup = PlayerLookup()
        with pytest.raises(LoadError):
            await lookup.initialize(["not", "a", "roster"])  # type: ignore[arg-type]
        with pytest.raises(LoadError):
            await lookup.initialize(roster)

        assert lookup.state == LookupState.FAILED

    async def test_failed_lookup_degrades_to_no_matches(self) -> None:
        lookup = PlayerLookup()
        with pytest.raises(LoadError):
            await lookup.initialize({"Arsenal": "Saka"})

        assert lookup.match("Saka scores") == []
        stats = lookup.aggregate([{"title": "Saka scores", "date": "2024-05-01"}])
        assert stats.total_article_count == 1
        assert stats.players_with_mention_count == 0
        assert stats.ranked_mentions == []


class TestMatchBeforeLoad:
    def test_match_before_initialize_returns_empty(self) -> None:
        lookup = PlayerLookup()
        assert lookup.match("Saka scores") == []


class TestIndependentInstances:
    async def test_two_rosters_in_one_process(self) -> None:
        first, second = PlayerLookup(), PlayerLookup()
        await first.initialize({"Arsenal": [{"name": "Bukayo Saka"}]})
        await second.initialize({"Chelsea": [{"name": "Cole Palmer"}]})

        headline = "Saka and Palmer in England squad"
        assert [p.name for p in first.match(headline)] == ["Bukayo Saka"]
        assert [p.name for p in second.match(headline)] == ["Cole Palmer"]


class TestGetStats:
    def test_not_loaded(self) -> None:
        stats = PlayerLookup().get_stats()
        assert stats.is_loaded is False
        assert stats.state == LookupState.NOT_LOADED
        assert stats.unique_surname_key_count == 0
        assert stats.total_indexed_player_count == 0

    async def test_counts_keys_and_aliases(self, lookup: PlayerLookup) -> None:
        stats = lookup.get_stats()
        assert stats.is_loaded is True
        # 8 distinct surnames plus the "odegaard" alias
        assert stats.unique_surname_key_count == 9
        # 9 players with a surname, Ødegaard counted under both keys
        assert stats.total_indexed_player_count == 10


class TestFilterByPlayers:
    async def test_keeps_articles_for_selected_players(self, lookup: PlayerLookup) -> None:
        articles = [
            {"title": "Saka scores", "date": "2024-05-01"},
            {"title": "Haaland scores", "date": "2024-05-02"},
            {"title": "Weather update", "date": "2024-05-03"},
        ]
        kept = lookup.filter_by_players(articles, ["Erling Haaland (Manchester City)"])
        assert [a.title for a in kept] == ["Haaland scores"]
