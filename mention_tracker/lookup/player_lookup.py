import asyncio
from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional, Union

from loguru import logger

from mention_tracker.aggregation import filters, mentions
from mention_tracker.models.article import Article
from mention_tracker.models.enums import LookupState
from mention_tracker.models.player import Player
from mention_tracker.models.stats import AggregateStats, LookupStats

from . import index_builder
from .index_builder import EMPTY_INDEX, LoadError, SurnameIndex
from .matcher import match_headline

RosterData = Mapping[str, Any]
RosterLoader = Callable[[], Awaitable[RosterData]]
RosterSource = Union[RosterData, RosterLoader]


class PlayerLookup:
    """Finds rostered players in headlines and summarizes their mentions.

    The roster is loaded once through `initialize`. Until it is ready (or if
    loading failed) every lookup degrades to "no matches" instead of raising.
    """

    def __init__(self) -> None:
        self._index: SurnameIndex = EMPTY_INDEX
        self.state: LookupState = LookupState.NOT_LOADED
        self._loading_task: Optional[asyncio.Task] = None

    @property
    def is_loaded(self) -> bool:
        return self.state == LookupState.READY

    async def initialize(self, source: RosterSource) -> None:
        """Loads the roster and builds the surname index.

        `source` is either the decoded team -> players mapping or an async
        callable returning it. Concurrent callers share the same load; once
        it has finished, later calls return (or raise) its outcome without
        loading again.

        Raises:
            LoadError: If the roster could not be fetched or has the wrong shape.
        """
        if self._loading_task is None:
            self.state = LookupState.LOADING
            self._loading_task = asyncio.ensure_future(self._load(source))
        # A cancelled caller must not cancel the load for everyone else
        await asyncio.shield(self._loading_task)

    async def _load(self, source: RosterSource) -> None:
        try:
            roster = await source() if callable(source) else source
            index = index_builder.build(roster)
        except LoadError as e:
            self.state = LookupState.FAILED
            logger.error(f"Failed to load player data: {e}")
            raise
        except Exception as e:
            self.state = LookupState.FAILED
            logger.exception(f"Unexpected error loading player data: {e}")
            raise LoadError(f"Failed to load player data: {e}") from e

        # Publish the finished index in one step
        self._index = index
        self.state = LookupState.READY
        logger.success(f"Player lookup ready with {len(index)} surname keys")

    def match(self, headline: Any) -> List[Player]:
        """Returns the players mentioned in `headline`, empty if not loaded."""
        if not self.is_loaded:
            return []
        return match_headline(headline, self._index)

    def aggregate(
        self,
        articles: Iterable[Any],
        keyword: Optional[str] = None,
        limit: int = mentions.DEFAULT_TOP_MENTIONS,
    ) -> AggregateStats:
        return mentions.aggregate_mentions(
            articles, self.match, keyword=keyword, limit=limit
        )

    def filter_by_players(
        self, articles: Iterable[Any], selected_labels: Iterable[str]
    ) -> List[Article]:
        return filters.filter_by_players(articles, self.match, selected_labels)

    def get_stats(self) -> LookupStats:
        index = self._index
        return LookupStats(
            state=self.state,
            is_loaded=self.is_loaded,
            unique_surname_key_count=len(index),
            total_indexed_player_count=sum(len(players) for players in index.values()),
        )
