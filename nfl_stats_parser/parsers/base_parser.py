"""
Base parser abstract class for NFL.com team statistics

This module provides an abstract base class implementing the shared
validate -> fetch -> normalize flow. Subclasses decide where the raw
table comes from.
"""

import logging
from abc import ABC, abstractmethod

from ..core.normalizer import NormalizeResult, normalize
from ..core.table import GenericTable
from ..utils.request_helpers import StatsRequest, validate_request


logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """
    Abstract base class for team statistics parsers

    Provides request validation and normalization. Subclasses must
    implement fetch_table().
    """

    @abstractmethod
    def fetch_table(self, request: StatsRequest) -> GenericTable:
        """
        Retrieve the raw statistics table for a request (must be implemented by subclass)

        Args:
            request: Validated request

        Returns:
            GenericTable with the header row first
        """

    def parse(self, stats: str = 'GAME_STATS', season=2019, role: str = 'offense',
              season_type: str = 'Regular') -> NormalizeResult:
        """
        Scrape and normalize one team statistics table

        Column names are identical between offense and defense; use the
        'role' field of each record to tell them apart.

        Args:
            stats: 'GAME_STATS', 'SCORING', 'TEAM_PASSING', 'RUSHING',
                'TEAM_RECEIVING' or 'OFFENSIVE_LINE'
            season: Season year, 1970 or later
            role: 'offense' or 'defense'
            season_type: 'Regular' or 'Playoffs'

        Returns:
            NormalizeResult with canonical records and row diagnostics

        Raises:
            RequestError: On invalid parameters or a table of the wrong shape
        """
        request = validate_request(stats, season, role, season_type)
        logger.info(f"Scraping {stats} for {role} from {request.season} {season_type}!")

        table = self.fetch_table(request)
        logger.debug(f"Fetched table: {table.row_count} rows x {table.column_count} columns")

        result = normalize(table, request.stats, request.role, request.season, request.season_type)

        if result.skipped_rows:
            logger.warning(f"{result.skipped_rows} rows skipped while parsing {stats} for {role}")
        return result
