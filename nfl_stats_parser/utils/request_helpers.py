"""
Request validation for NFL.com team stats

Checks user-supplied request parameters before anything is fetched and maps
the season type to the code used by the stats pages.
"""

import datetime
from dataclasses import dataclass

from ..constants import MIN_SEASON, ROLES, SEASON_TYPES, SUPPORTED_STATS
from ..exceptions import InvalidRequest, UnknownCategory


@dataclass(frozen=True)
class StatsRequest:
    stats: str
    season: int
    role: str
    season_type: str  # 'REG' or 'POST'


def current_season_limit() -> int:
    """Latest season that can be requested (current calendar year)"""
    return datetime.date.today().year


def validate_request(stats: str, season, role: str = 'offense', season_type: str = 'Regular') -> StatsRequest:
    """
    Validate request parameters

    Args:
        stats: Statistics category
        season: Season year (int or numeric string)
        role: 'offense' or 'defense'
        season_type: 'Regular' or 'Playoffs'

    Returns:
        StatsRequest with season as int and season_type as 'REG'/'POST'

    Raises:
        InvalidRequest: If season_type, role or season is invalid
        UnknownCategory: If stats is not a supported category
    """
    if season_type not in SEASON_TYPES:
        raise InvalidRequest('season_type', season_type, "choose 'Regular' or 'Playoffs'")

    if role not in ROLES:
        raise InvalidRequest('role', role, "choose 'offense' or 'defense'")

    if stats not in SUPPORTED_STATS:
        raise UnknownCategory(stats)

    try:
        season_year = int(str(season).strip())
    except ValueError:
        raise InvalidRequest('season', season, "season must be a year") from None

    latest = current_season_limit()
    if not MIN_SEASON <= season_year <= latest:
        raise InvalidRequest('season', season, f"choose season between {MIN_SEASON} and {latest}")

    return StatsRequest(
        stats=stats,
        season=season_year,
        role=role,
        season_type=SEASON_TYPES[season_type]
    )
