import re
from typing import Any, List, Set, Tuple

from mention_tracker.models.player import Player
from mention_tracker.normalization.text import contains_whole_word, normalize_text

from .index_builder import SurnameIndex

_SURNAME_PART_SPLIT = re.compile(r"[-\s]+")


def _blocked_keys(surname_key: str) -> Set[str]:
    """Keys to exclude from surname-only matching once this surname matched by full name.

    Includes every part of a hyphenated or multi-word surname, so a full
    "Lewis-Skelly" match also blocks a bare "Lewis".
    """
    blocked = {surname_key.lower(), normalize_text(surname_key)}
    for part in _SURNAME_PART_SPLIT.split(surname_key):
        part = part.strip()
        if part:
            blocked.add(part.lower())
            blocked.add(normalize_text(part))
    return blocked


def match_headline(headline: Any, index: SurnameIndex) -> List[Player]:
    """Returns the players mentioned in a headline.

    Full names are checked first, against both the raw and the normalized
    headline. A full-name match suppresses surname-only matching for that
    surname and its parts. Remaining surname keys are then matched as whole
    words against the raw headline and contribute every player listed under
    them. Each player (name + team) appears at most once, in discovery
    order.
    """
    if not index or not headline or not isinstance(headline, str):
        return []

    matched: List[Player] = []
    seen: Set[Tuple[str, str]] = set()
    full_match_blocked: Set[str] = set()
    headline_normalized = normalize_text(headline)

    # First pass: forename + surname
    for surname_key, players in index.items():
        for player in players:
            if not player.forename or player.key in seen:
                continue
            raw_pattern, normalized_pattern = player.full_name_patterns
            if not (
                raw_pattern.search(headline)
                or normalized_pattern.search(headline_normalized)
            ):
                continue
            seen.add(player.key)
            matched.append(player)
            full_match_blocked |= _blocked_keys(surname_key)

    # Second pass: bare surnames without a full-name match
    for surname_key, players in index.items():
        if (
            surname_key.lower() in full_match_blocked
            or normalize_text(surname_key) in full_match_blocked
        ):
            continue
        if not contains_whole_word(headline, surname_key):
            continue
        for player in players:
            if player.key not in seen:
                seen.add(player.key)
                matched.append(player)

    return matched
