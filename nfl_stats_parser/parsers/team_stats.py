"""
Team statistics parser for NFL.com

Fetches the category stats page for a request and hands its first table
to the normalizer.
"""

from .base_parser import BaseParser
from ..core.scraper import NFLScraper, extract_stats_table
from ..core.table import GenericTable
from ..utils.request_helpers import StatsRequest
from ..utils.url_helpers import build_stats_url


class TeamStatsParser(BaseParser):
    """Parser for team-level offense/defense statistics from NFL.com"""

    def __init__(self, scraper: NFLScraper = None):
        """
        Initialize team stats parser

        Args:
            scraper: Optional scraper instance, a new NFLScraper by default
        """
        self.scraper = scraper or NFLScraper()

    def fetch_table(self, request: StatsRequest) -> GenericTable:
        url = build_stats_url(request.stats, request.season, request.season_type, request.role)
        soup = self.scraper.get_soup(url)
        return extract_stats_table(soup, source=url)


def scrape_team_stats(stats: str = 'GAME_STATS', season=2019, role: str = 'offense',
                      season_type: str = 'Regular'):
    """
    Scrape NFL.com stats at the team level

    Shortcut for TeamStatsParser().parse(...).

    Returns:
        NormalizeResult
    """
    return TeamStatsParser().parse(stats=stats, season=season, role=role, season_type=season_type)
