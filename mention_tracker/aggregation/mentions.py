from collections import Counter
from typing import Any, Callable, Iterable, List, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from mention_tracker.models.article import Article
from mention_tracker.models.player import Player
from mention_tracker.models.stats import AggregateStats, PlayerMention
from mention_tracker.utils.misc_utils import parse_article_date

DEFAULT_TOP_MENTIONS = 10

NO_ARTICLES_LABEL = "No articles found"
UNKNOWN_RANGE_LABEL = "Unknown date range"

HeadlineMatcher = Callable[[Any], List[Player]]


def _coerce_article(article: Any) -> Article:
    if isinstance(article, Article):
        return article
    try:
        return Article.model_validate(article)
    except ValidationError as e:
        logger.debug(f"Treating malformed article record as untitled: {e}")
        return Article()


def coerce_articles(articles: Iterable[Any]) -> List[Article]:
    """Validates plain dicts into Article models, passing Articles through.

    Each record is validated on its own; one that is not a mapping still
    counts as an (untitled, undated) article.
    """
    return [_coerce_article(article) for article in articles]


def date_range_label(articles: Sequence[Article]) -> str:
    """Describes the calendar span of the articles' dates.

    Articles whose date cannot be parsed are left out of the span.
    """
    if not articles:
        return NO_ARTICLES_LABEL

    dates = sorted(
        parsed
        for parsed in (parse_article_date(article.date) for article in articles)
        if parsed is not None
    )
    if not dates:
        return UNKNOWN_RANGE_LABEL

    oldest, newest = dates[0].date(), dates[-1].date()
    if oldest == newest:
        return newest.isoformat()
    return f"{oldest.isoformat()} - {newest.isoformat()}"


def aggregate_mentions(
    articles: Iterable[Any],
    matcher: HeadlineMatcher,
    keyword: Optional[str] = None,
    limit: int = DEFAULT_TOP_MENTIONS,
) -> AggregateStats:
    """Counts, per player, the articles whose title mentions them.

    Each article counts at most once per player. The ranking is by count,
    highest first; ties keep the order in which players were first seen.
    """
    collection = coerce_articles(articles)
    if not collection:
        return AggregateStats(keyword=keyword)

    mention_counts: Counter = Counter()
    articles_with_players = 0
    for article in collection:
        matched_players = matcher(article.title)
        if matched_players:
            articles_with_players += 1
        for player in matched_players:
            mention_counts[player.label] += 1

    # sorted() is stable and Counter keeps first-seen order
    ranked = sorted(mention_counts.items(), key=lambda item: item[1], reverse=True)
    stats = AggregateStats(
        total_article_count=len(collection),
        date_range_label=date_range_label(collection),
        players_with_mention_count=articles_with_players,
        ranked_mentions=[
            PlayerMention(player_label=label, count=count)
            for label, count in ranked[:limit]
        ],
        keyword=keyword,
    )
    logger.debug(
        f"Aggregated {stats.total_article_count} articles: "
        f"{articles_with_players} mention players, {len(mention_counts)} distinct players"
    )
    return stats
