"""
URL building utilities for NFL.com stats pages
"""

from ..constants import OFFENSE, ROLE_CODES, STATS_URL_TEMPLATE


def build_stats_url(stats: str, season, season_type: str, role: str) -> str:
    """
    Build URL of a team statistics category page

    Offense pages pass the category as offensiveStatisticCategory with
    role=TM; defense pages pass it as defensiveStatisticCategory with role=OPP.

    Args:
        stats: Statistics category (e.g. 'RUSHING')
        season: Season year
        season_type: Season type code ('REG' or 'POST')
        role: 'offense' or 'defense'

    Returns:
        Complete NFL.com URL
    """
    is_offense = role == OFFENSE
    return STATS_URL_TEMPLATE.format(
        role_code=ROLE_CODES[role],
        offensive_category=stats if is_offense else 'null',
        defensive_category='null' if is_offense else stats,
        season=season,
        season_type=season_type
    )
