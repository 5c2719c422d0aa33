"""
Parser implementations for NFL.com team statistics

Contains:
- BaseParser: Abstract base class with shared validate/normalize logic
- TeamStatsParser: Parser fetching NFL.com category stats pages
"""

from .base_parser import BaseParser
from .team_stats import TeamStatsParser, scrape_team_stats

__all__ = ['BaseParser', 'TeamStatsParser', 'scrape_team_stats']
