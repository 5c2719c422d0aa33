"""
NFL Stats Parser - Python package for scraping team statistics from NFL.com

This package provides modular components for turning team statistics tables into
consistently named, typed records:
- Schema registry with the canonical columns of every statistics category
- Normalizer applying renames, numeric/percentage/duration conversion and type inference
- Scraper and team stats parser fetching the category pages

Main exports:
    TeamStatsParser: Parser fetching and normalizing NFL.com team stats
    scrape_team_stats: Shortcut for TeamStatsParser().parse()
    normalize: Normalize an already parsed GenericTable
    GenericTable: Raw table handed to the normalizer
"""

from .core.normalizer import CanonicalRecord, NormalizeResult, RowDiagnostic, normalize
from .core.schema_registry import lookup
from .core.table import GenericTable
from .parsers.team_stats import TeamStatsParser, scrape_team_stats

__version__ = "1.0.0"
__all__ = [
    'TeamStatsParser',
    'scrape_team_stats',
    'normalize',
    'lookup',
    'GenericTable',
    'CanonicalRecord',
    'NormalizeResult',
    'RowDiagnostic'
]
