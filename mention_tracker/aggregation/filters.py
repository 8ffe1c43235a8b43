from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Set

from loguru import logger

from mention_tracker.models.article import Article
from mention_tracker.utils.misc_utils import parse_article_date

from .mentions import HeadlineMatcher, coerce_articles


def filter_by_keyword(articles: Iterable[Any], keyword: Optional[str]) -> List[Article]:
    """Keeps articles whose title contains `keyword` (case-insensitive).

    An empty keyword keeps everything.
    """
    collection = coerce_articles(articles)
    if not keyword:
        return collection

    keyword_lower = keyword.lower()
    kept = [
        article
        for article in collection
        if article.title and keyword_lower in article.title.lower()
    ]
    logger.debug(
        f"{len(kept)} of {len(collection)} articles contain '{keyword}' in title"
    )
    return kept


def merge_articles(existing: Iterable[Any], incoming: Iterable[Any]) -> List[Article]:
    """Adds new articles to a collection, skipping titles already present.

    The merged collection is ordered newest first; articles without a
    parseable date go last.
    """
    merged = coerce_articles(existing)
    seen_titles: Set[Optional[str]] = {article.title for article in merged}
    for article in coerce_articles(incoming):
        if article.title in seen_titles:
            continue
        seen_titles.add(article.title)
        merged.append(article)

    oldest = datetime.min.replace(tzinfo=timezone.utc)
    merged.sort(
        key=lambda article: parse_article_date(article.date) or oldest, reverse=True
    )
    return merged


def filter_by_players(
    articles: Iterable[Any], matcher: HeadlineMatcher, selected_labels: Iterable[str]
) -> List[Article]:
    """Keeps articles mentioning any of the selected "<name> (<team>)" labels.

    An empty selection keeps everything.
    """
    collection = coerce_articles(articles)
    selected = set(selected_labels)
    if not selected:
        return collection

    return [
        article
        for article in collection
        if any(player.label in selected for player in matcher(article.title))
    ]
