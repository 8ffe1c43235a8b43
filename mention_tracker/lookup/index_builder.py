from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from loguru import logger
from pydantic import ValidationError

from mention_tracker.models.player import Player
from mention_tracker.normalization.text import normalize_text

# Surname key (raw lower-cased or normalized) -> players in roster order
SurnameIndex = Mapping[str, Tuple[Player, ...]]

EMPTY_INDEX: SurnameIndex = MappingProxyType({})


class LoadError(Exception):
    """Raised when a roster cannot be loaded or does not have the expected shape."""

    pass


def flatten_roster(roster_by_team: Mapping[str, Any]) -> List[Player]:
    """Flattens a team -> players roster into one ordered list of Players.

    Entries without a string name are skipped; a roster that is not a
    mapping of team name to list raises LoadError.
    """
    if not isinstance(roster_by_team, Mapping):
        raise LoadError(
            f"Roster must be a mapping of team name to players, got {type(roster_by_team).__name__}"
        )

    players: List[Player] = []
    for team, entries in roster_by_team.items():
        if not isinstance(team, str) or not isinstance(entries, list):
            raise LoadError(f"Roster entry for team {team!r} is not a list of players")

        for entry in entries:
            if not isinstance(entry, Mapping) or not isinstance(entry.get("name"), str):
                logger.debug(f"Skipping malformed roster entry for {team}: {entry!r}")
                continue
            try:
                players.append(Player.from_roster_entry(team, entry))
            except ValidationError as e:
                logger.debug(f"Skipping invalid roster entry for {team}: {e}")

    return players


def build_surname_index(players: List[Player]) -> SurnameIndex:
    """Indexes players by lower-cased surname and by its normalized form.

    A player is listed under its raw key and, when normalization changes
    it, also under the normalized key. Players without a usable surname
    stay out of the index. The result is read-only.
    """
    index: Dict[str, List[Player]] = {}

    for player in players:
        if not player.surname or not isinstance(player.surname, str):
            continue
        raw_key = player.surname.strip().lower()
        if not raw_key:
            continue

        index.setdefault(raw_key, []).append(player)

        norm_key = normalize_text(player.surname)
        if norm_key != raw_key:
            index.setdefault(norm_key, []).append(player)

    logger.info(
        f"Built surname index with {len(index)} unique surnames (including normalized variants)"
    )
    return MappingProxyType({key: tuple(group) for key, group in index.items()})


def build(roster_by_team: Mapping[str, Any]) -> SurnameIndex:
    """Builds a complete surname index from a decoded team -> players roster."""
    players = flatten_roster(roster_by_team)
    logger.info(f"Loaded {len(players)} players from {len(roster_by_team)} teams")
    return build_surname_index(players)
