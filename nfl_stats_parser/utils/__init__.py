"""
Utility functions for NFL.com parsing

Contains modules for:
- URL building (url_helpers.py)
- Request validation (request_helpers.py)
"""

from .url_helpers import build_stats_url
from .request_helpers import StatsRequest, validate_request, current_season_limit

__all__ = [
    'build_stats_url',
    'StatsRequest',
    'validate_request',
    'current_season_limit'
]
