from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import LookupState


class PlayerMention(BaseModel):
    """Number of articles mentioning one player."""

    player_label: str  # "<name> (<team>)"
    count: int = Field(..., ge=0)


class AggregateStats(BaseModel):
    """Summary of player mentions across an article collection."""

    total_article_count: int = 0
    date_range_label: str = "No articles found"
    # Articles with at least one match, not the sum of mentions
    players_with_mention_count: int = 0
    ranked_mentions: List[PlayerMention] = []
    keyword: Optional[str] = None


class LookupStats(BaseModel):
    """Diagnostics for a PlayerLookup instance."""

    state: LookupState
    is_loaded: bool
    unique_surname_key_count: int
    # Players listed under both a raw and a normalized key count twice
    total_indexed_player_count: int
