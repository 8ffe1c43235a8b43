import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from loguru import logger

from mention_tracker.lookup.index_builder import LoadError


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def _load_json(path: Union[str, Path], what: str) -> Any:
    path = Path(path)
    logger.info(f"Loading {what} from {path}...")
    try:
        return await asyncio.to_thread(_read_json, path)
    except FileNotFoundError as e:
        raise LoadError(f"Failed to load {path}: file not found") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Failed to load {path}: invalid JSON ({e})") from e
    except OSError as e:
        raise LoadError(f"Failed to load {path}: {e}") from e


async def load_roster_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Reads a players-by-team JSON file (team name -> list of player records)."""
    roster = await _load_json(path, "roster")
    if not isinstance(roster, dict):
        raise LoadError(f"Roster file {path} does not contain a JSON object")
    return roster


async def load_articles_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Reads a list of article records.

    Accepts either a bare JSON list or the news API response shape
    `{"articles": {"results": [...]}}`.
    """
    data = await _load_json(path, "articles")
    if isinstance(data, dict):
        articles = data.get("articles")
        data = articles.get("results") if isinstance(articles, dict) else None
    if not isinstance(data, list):
        raise LoadError(f"Unexpected article file structure in {path}")
    logger.info(f"Found {len(data)} articles in {path}")
    return data
