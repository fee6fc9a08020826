"""
Gwent Crawler Utilities
"""

from .data_exporter import DataExporter
from .logging_config import setup_logging
from .player_loader import PlayerListLoader

__all__ = ['DataExporter', 'setup_logging', 'PlayerListLoader']
