# mention_tracker/utils/misc_utils.py
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

from loguru import logger


def parse_article_date(value: Optional[str]) -> Optional[datetime]:
    """Parses an article date into an aware UTC datetime.

    Accepts ISO 8601 dates and datetimes (a trailing "Z" included) as well as
    RFC 2822 dates from feeds. Naive values are taken to be UTC. Returns None
    when the value cannot be parsed.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError):
            dt = None
    if dt is None:
        logger.debug(f"Could not parse article date: {value!r}")
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        # e.g. "0001-01-01T00:00:00+01:00" falls before datetime.min in UTC
        logger.debug(f"Article date out of range: {value!r}")
        return None
