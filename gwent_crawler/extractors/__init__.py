"""
Gwent Profile Extractors
"""

from .profile_extractor import ProfileExtractor, PRIVATE_MARKER

__all__ = ['ProfileExtractor', 'PRIVATE_MARKER']
