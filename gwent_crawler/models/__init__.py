"""
Gwent Crawler Data Models
"""

from .player import FactionCount, PlayerRecord, ProfileStats

__all__ = ['FactionCount', 'PlayerRecord', 'ProfileStats']
