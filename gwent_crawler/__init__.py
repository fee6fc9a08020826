"""
Gwent Crawler - Player statistics extraction from Gwent profile pages

This package fetches public player profiles with bounded parallelism,
extracts their statistics and exports a consolidated CSV table.
"""

from .config import CrawlerConfig
from .core import ProfileCrawler, WebClient
from .exceptions import CrawlerError, RunAborted
from .models import PlayerRecord, ProfileStats
from .utils import DataExporter, PlayerListLoader, setup_logging

__version__ = "1.0.0"

__all__ = [
    'CrawlerConfig',
    'ProfileCrawler',
    'WebClient',
    'CrawlerError',
    'RunAborted',
    'PlayerRecord',
    'ProfileStats',
    'DataExporter',
    'PlayerListLoader',
    'setup_logging',
]
