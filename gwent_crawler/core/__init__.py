"""
Core Gwent Crawler Components
"""

from .profile_crawler import ProfileCrawler
from .web_client import WebClient

__all__ = ['ProfileCrawler', 'WebClient']
