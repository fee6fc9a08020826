"""
Gwent Crawler Configuration Settings
"""

from dataclasses import dataclass
from typing import Optional

# Input / output files
DEFAULT_ID_FILE = 'Players.csv'
DEFAULT_OUTPUT_FILE = 'Data.csv'
DEFAULT_FACTIONS_FILE = None  # Faction breakdown table is off unless requested

# Network settings
DEFAULT_CONCURRENCY = 8
REQUEST_TIMEOUT = None  # No timeout: a hung request holds its slot

# User Agent
DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'

# Headers
DEFAULT_HEADERS = {
    'User-Agent': DEFAULT_USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
    'Accept-Encoding': 'gzip, deflate',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1',
}

# Gwent URLs
PROFILE_BASE_URL = "https://www.playgwent.com/en/profile/"

# Player defaults
DEFAULT_RANK = 30

# Extraction gate policies
GATE_OWN_MATCH = 'own_match'
GATE_MMR_MATCH = 'mmr_match'
DEFAULT_GATE_POLICY = GATE_OWN_MATCH

# Data export settings
DEFAULT_CSV_FIELDS = [
    "id", "rank", "total wins", "current wins", "current losses",
    "current draws", "MMR", "prestige", "level"
]
FACTION_CSV_FIELDS = ["id", "season", "faction", "wins"]

# Logging
DEBUG = False
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class CrawlerConfig:
    """Runtime settings for a single crawl"""

    id_file: str = DEFAULT_ID_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    factions_file: Optional[str] = DEFAULT_FACTIONS_FILE
    concurrency: int = DEFAULT_CONCURRENCY
    base_url: str = PROFILE_BASE_URL
    debug: bool = DEBUG
    request_timeout: Optional[float] = REQUEST_TIMEOUT
    gate_policy: str = DEFAULT_GATE_POLICY

    def __post_init__(self):
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.gate_policy not in (GATE_OWN_MATCH, GATE_MMR_MATCH):
            raise ValueError(f"Unknown gate policy: {self.gate_policy!r}")

    def profile_url(self, identifier: str) -> str:
        """Build the profile page URL for a player identifier."""
        return f"{self.base_url}{identifier}"
