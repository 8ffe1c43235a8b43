import re
from functools import cached_property
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, computed_field

from mention_tracker.normalization.text import normalize_text, whole_word_pattern


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class Player(BaseModel):
    """A rostered player, as read from the players-by-team file."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    name: str  # Display name, e.g. "Martin Ødegaard"
    forename: str = ""
    surname: str = ""  # Everything after the first space, may be empty
    team: str
    position: Optional[str] = None
    league: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        """Identity used to de-duplicate matches (name + team)."""
        return (self.name, self.team)

    @computed_field  # type: ignore[misc]
    @property
    def label(self) -> str:
        return f"{self.name} ({self.team})"

    @cached_property
    def full_name(self) -> str:
        return f"{self.forename} {self.surname}"

    @cached_property
    def full_name_patterns(self) -> Tuple[re.Pattern, re.Pattern]:
        """Whole-word patterns for the raw and the normalized full name.

        Built once per player so repeated headline checks skip recompiling.
        """
        return (
            whole_word_pattern(self.full_name),
            whole_word_pattern(normalize_text(self.full_name)),
        )

    @classmethod
    def from_roster_entry(cls, team: str, entry: Mapping[str, Any]) -> "Player":
        """Builds a Player from one roster record, splitting the name on its first space.

        A non-string position or league (e.g. a shirt number) is dropped
        rather than rejecting the player.
        """
        name = entry["name"]
        forename, _, surname = name.strip().partition(" ")
        return cls(
            name=name,
            forename=forename,
            surname=surname,
            team=team,
            position=_optional_str(entry.get("position")),
            league=_optional_str(entry.get("league")),
        )
