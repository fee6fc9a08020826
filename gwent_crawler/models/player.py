"""
Player data models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gwent_crawler.config.settings import DEFAULT_RANK


@dataclass
class FactionCount:
    """Win count for a single faction."""
    slug: str = ""
    count: int = 0


@dataclass
class ProfileStats:
    """Overall win count plus its per-faction breakdown."""
    overall: int = 0
    factions: List[FactionCount] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> "ProfileStats":
        """
        Build stats from a decoded profile JSON fragment.

        Args:
            data: Decoded object, or None for a JSON ``null``

        Returns:
            ProfileStats (zero-valued when data is None)

        Raises:
            TypeError: If the fragment is not shaped like profile stats
            ValueError: If a count is not an integer
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        factions = []
        for entry in data.get("factions") or []:
            if not isinstance(entry, dict):
                raise TypeError(f"expected a faction object, got {type(entry).__name__}")
            factions.append(FactionCount(
                slug=str(entry.get("slug") or ""),
                count=_json_int(entry.get("count")),
            ))

        return cls(overall=_json_int(data.get("overall")), factions=factions)


@dataclass
class PlayerRecord:
    """Statistics scraped from one player profile."""
    identifier: str
    rank: int = DEFAULT_RANK
    prestige: int = 0
    level: int = 0
    mmr: int = 0
    losses: int = 0
    draws: int = 0
    current: ProfileStats = field(default_factory=ProfileStats)
    total: ProfileStats = field(default_factory=ProfileStats)

    def to_row(self) -> List[str]:
        """Render the record as a Data.csv row."""
        values = [
            self.rank, self.total.overall, self.current.overall,
            self.losses, self.draws, self.mmr, self.prestige, self.level,
        ]
        return [self.identifier] + [str(int(v)) for v in values]

    def faction_rows(self) -> List[List[str]]:
        """Render the per-faction breakdowns as long-format rows."""
        rows = []
        for season, stats in (("total", self.total), ("current", self.current)):
            for faction in stats.factions:
                rows.append([self.identifier, season, faction.slug, str(faction.count)])
        return rows


def _json_int(value: Any) -> int:
    # Whole-number JSON values only; null counts as zero
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("expected an integer, got bool")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value}")
        return int(value)
    if isinstance(value, int):
        return value
    raise TypeError(f"expected an integer, got {type(value).__name__}")
