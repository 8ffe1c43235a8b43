import sys
import asyncio

# --- Settings/Logging ---
from mention_tracker.logging.setup import setup_logging
from mention_tracker.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

from mention_tracker.aggregation.filters import filter_by_keyword
from mention_tracker.lookup.index_builder import LoadError
from mention_tracker.lookup.player_lookup import PlayerLookup
from mention_tracker.models.stats import AggregateStats
from mention_tracker.storage.json_files import load_articles_file, load_roster_file

from rich import print
from rich.panel import Panel
from rich.table import Table


def render_summary(stats: AggregateStats) -> None:
    """Prints the summary panel and the ranked mention table."""
    keyword_line = f"Keyword: {stats.keyword}\n" if stats.keyword else ""
    print(
        Panel(
            f"{keyword_line}"
            f"Articles: {stats.total_article_count}\n"
            f"Date range: {stats.date_range_label}\n"
            f"Articles mentioning players: {stats.players_with_mention_count}",
            title="Player Mentions",
        )
    )

    table = Table(title=f"Top {len(stats.ranked_mentions)} mentioned players")
    table.add_column("Player")
    table.add_column("Mentions", justify="right")
    if stats.ranked_mentions:
        for mention in stats.ranked_mentions:
            table.add_row(mention.player_label, str(mention.count))
    else:
        table.add_row("No players mentioned", "")
    print(table)


async def main() -> None:
    """Main entry point for the application."""
    logger.info("Starting player mention tracker")

    lookup = PlayerLookup()
    try:
        await lookup.initialize(lambda: load_roster_file(settings.roster_path))
        logger.success("Player lookup system ready")
    except LoadError as e:
        # Keep going, headlines simply won't match anyone
        logger.error(f"Failed to initialize player lookup: {e}")

    try:
        articles = await load_articles_file(settings.articles_path)
    except LoadError as e:
        logger.critical(f"Could not read articles: {e}")
        return

    articles = filter_by_keyword(articles, settings.keyword)
    stats = lookup.aggregate(
        articles, keyword=settings.keyword, limit=settings.top_mentions_limit
    )
    logger.info(
        f"{stats.players_with_mention_count} of {stats.total_article_count} articles mention players"
    )
    logger.debug(f"Lookup stats: {lookup.get_stats().model_dump()}")
    render_summary(stats)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
