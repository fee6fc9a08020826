"""
Profile Statistics Extractor for Gwent Player Pages

Fields are pulled out of the raw page markup with fixed patterns. Each
pattern is an independent rule; only the private-profile marker can stop
extraction early.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Pattern, Tuple

from gwent_crawler.config.settings import DEFAULT_GATE_POLICY, GATE_MMR_MATCH, GATE_OWN_MATCH
from gwent_crawler.exceptions import ExtractionError
from gwent_crawler.models.player import PlayerRecord, ProfileStats

PRIVATE_MARKER = "THIS PLAYER PROFILE IS PRIVATE"


def parse_int(text: str) -> int:
    """Parse a plain run of digits."""
    return int(text)


def parse_grouped_int(text: str) -> int:
    """Parse digits that may carry thousands separators, e.g. '1,234'."""
    return int(text.replace(",", ""))


@dataclass(frozen=True)
class StatsRule:
    """Embedded ``var name = {...};`` JSON fragment feeding a ProfileStats field."""
    label: str
    pattern: Pattern
    target: str


@dataclass(frozen=True)
class NumericRule:
    """
    Integer field(s) read from a display fragment.

    ``fields`` name both the record attributes and the pattern groups.
    ``legacy_gate`` is the label of the rule whose match decides whether this
    rule is parsed when the MMR gate policy is active.
    """
    label: str
    pattern: Pattern
    fields: Tuple[str, ...]
    parse: Callable[[str], int]
    legacy_gate: Optional[str] = None


STATS_RULES = (
    StatsRule("wins", re.compile(r"var profileDataWins = (?P<json>.*?);"), "total"),
    StatsRule("current", re.compile(r"var profileDataCurrent = (?P<json>.*?);"), "current"),
)

NUMERIC_RULES = (
    NumericRule("mmr", re.compile(r"(?P<mmr>[0-9][0-9,]*) MMR"), ("mmr",), parse_grouped_int),
    NumericRule("losses", re.compile(r"Losses</td><td>(?P<losses>[0-9,]*) matches</td>"),
                ("losses",), parse_grouped_int, legacy_gate="mmr"),
    NumericRule("draws", re.compile(r"Draws</td><td>(?P<draws>[0-9,]*) matches</td>"),
                ("draws",), parse_grouped_int, legacy_gate="mmr"),
    NumericRule("rank", re.compile(r'-details__rank"><strong>(?P<rank>[0-9]*)<'),
                ("rank",), parse_int, legacy_gate="mmr"),
    NumericRule("prestige", re.compile(r'prestige--(?P<prestige>[0-9]*)"><strong>\s*(?P<level>[0-9]*)', re.ASCII),
                ("prestige", "level"), parse_int),
)


class ProfileExtractor:
    """Extracts player statistics from a Gwent profile page"""

    def __init__(self, gate_policy: str = DEFAULT_GATE_POLICY):
        """
        Initialize extractor.

        Args:
            gate_policy: GATE_OWN_MATCH parses each field when its own marker
                is found. GATE_MMR_MATCH decides losses, draws and rank on
                whether the MMR marker is found, like the first version of
                this scraper did.
        """
        if gate_policy not in (GATE_OWN_MATCH, GATE_MMR_MATCH):
            raise ValueError(f"Unknown gate policy: {gate_policy!r}")
        self.gate_policy = gate_policy
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def is_private(html: str) -> bool:
        """Check whether the page is a private profile notice"""
        return PRIVATE_MARKER in html

    def extract(self, html: str, record: PlayerRecord) -> PlayerRecord:
        """
        Extract profile statistics into a player record.

        Args:
            html: Profile page content
            record: Record to fill; untouched fields keep their defaults

        Returns:
            The same record

        Raises:
            ExtractionError: If a matched field cannot be decoded
        """
        if self.is_private(html):
            self.logger.debug(f"{record.identifier}'s profile is private")
            return record

        for rule in STATS_RULES:
            stats = self._extract_stats(rule, html, record.identifier)
            if stats is not None:
                setattr(record, rule.target, stats)

        matches = {rule.label: rule.pattern.search(html) for rule in NUMERIC_RULES}
        for rule in NUMERIC_RULES:
            self._apply_numeric(rule, matches, record)

        return record

    def _gate_for(self, rule: NumericRule) -> str:
        if self.gate_policy == GATE_MMR_MATCH and rule.legacy_gate:
            return rule.legacy_gate
        return rule.label

    def _apply_numeric(self, rule: NumericRule, matches: Dict[str, Optional[re.Match]],
                       record: PlayerRecord):
        gate = self._gate_for(rule)
        if matches[gate] is None:
            return

        match = matches[rule.label]
        if match is None:
            raise ExtractionError(
                f"{record.identifier}: {gate} marker found but {rule.label} marker is missing"
            )

        for field_name in rule.fields:
            text = match.group(field_name)
            try:
                value = rule.parse(text)
            except ValueError as e:
                raise ExtractionError(
                    f"{record.identifier}: cannot parse {field_name} from {text!r}"
                ) from e
            setattr(record, field_name, value)

    @staticmethod
    def _extract_stats(rule: StatsRule, html: str, identifier: str) -> Optional[ProfileStats]:
        match = rule.pattern.search(html)
        if not match:
            return None

        fragment = match.group("json")
        try:
            return ProfileStats.from_json(json.loads(fragment))
        except (ValueError, TypeError) as e:
            raise ExtractionError(
                f"{identifier}: cannot decode {rule.label} data {fragment!r}: {e}"
            ) from e
