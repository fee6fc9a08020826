"""
Gwent Crawler Configuration
"""

from .settings import CrawlerConfig

__all__ = ['CrawlerConfig']
