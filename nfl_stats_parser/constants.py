"""
Constants and configuration for NFL.com team statistics parsers.

This module contains all shared constants including supported categories,
canonical column lists, per-column transform designations, request URLs and
HTTP settings used by the scraper and the normalizer.
"""

# Statistic categories published on the NFL.com team stats pages
GAME_STATS = 'GAME_STATS'
SCORING = 'SCORING'
TEAM_PASSING = 'TEAM_PASSING'
RUSHING = 'RUSHING'
TEAM_RECEIVING = 'TEAM_RECEIVING'
OFFENSIVE_LINE = 'OFFENSIVE_LINE'

SUPPORTED_STATS = (
    GAME_STATS,
    SCORING,
    TEAM_PASSING,
    RUSHING,
    TEAM_RECEIVING,
    OFFENSIVE_LINE
)

# Roles (offense = team's own stats, defense = opponents' stats)
OFFENSE = 'offense'
DEFENSE = 'defense'
ROLES = (OFFENSE, DEFENSE)

# Season types accepted from callers and their URL codes
SEASON_TYPES = {
    'Regular': 'REG',
    'Playoffs': 'POST'
}

# Earliest season available on NFL.com
MIN_SEASON = 1970

# Canonical column names (output schema contract, must stay verbatim)
GAME_STATS_COLUMNS = [
    'rank', 'team', 'games', 'pts_game', 'pts_total', 'plays_scrimmage',
    'yds_game', 'yds_play', 'first_down_g', 'third_conv', 'third_att',
    'third_pct', 'fourth_conv', 'fourth_att', 'fourth_pct', 'penalty',
    'penalty_yds', 'time_of_poss', 'fumbles_total', 'fumbles_lost',
    'turnover_ratio'
]

# Defense pages have no turnover ratio column
GAME_STATS_DEFENSE_COLUMNS = GAME_STATS_COLUMNS[:20]

SCORING_COLUMNS = [
    'rank', 'team', 'games', 'pts_game', 'pts_total', 'td_rush',
    'td_rec', 'td_punt', 'td_kick', 'td_int', 'td_fumble',
    'td_fg', 'td_extra_pt', 'extra_points_made', 'field_goal_made',
    'safety', 'two_point_converted'
]

TEAM_PASSING_COLUMNS = [
    'rank', 'team', 'games', 'pts_game', 'pts_total', 'pass_comp',
    'pass_att', 'pass_comp_pct', 'pass_att_g', 'pass_yds', 'pass_avg',
    'pass_yds_g', 'pass_td', 'pass_int', 'pass_first', 'pass_first_pct',
    'pass_long', 'pass_20_plus', 'pass_40_plus', 'pass_sack', 'pass_rating'
]

RUSHING_COLUMNS = [
    'rank', 'team', 'games', 'pts_game', 'pts_total', 'rush_att',
    'rush_att_g', 'rush_yds', 'rush_avg', 'rush_yds_g', 'rush_td',
    'rush_long', 'rush_first', 'rush_first_pct', 'rush_20_plus',
    'rush_40_plus', 'rush_fumbles'
]

TEAM_RECEIVING_COLUMNS = [
    'rank', 'team', 'games', 'pts_game', 'pts_total', 'rec',
    'rec_yds', 'rec_avg', 'rec_yds_g', 'rec_lng', 'rec_td',
    'rec_20_plus', 'rec_40_plus', 'rec_first', 'rec_first_pct', 'rec_fumbles'
]

OFFENSIVE_LINE_COLUMNS = [
    'rank', 'team', 'experience', 'rush_att', 'rush_yds', 'rush_avg',
    'rush_td', 'left_rush_first', 'left_rush_neg', 'left_rush_10_plus', 'left_rush_power',
    'center_rush_first', 'center_rush_neg', 'center_rush_10_plus', 'center_rush_power',
    'right_rush_first', 'right_rush_neg', 'right_rush_10_plus', 'right_rush_power',
    'sacks', 'qb_hits'
]

# Columns holding text (never coerced)
IDENTITY_COLUMNS = ['team']

# Yardage totals formatted with thousands separators ("1,234")
COMMA_STRIPPED_COLUMNS = {
    GAME_STATS: ['plays_scrimmage', 'penalty_yds'],
    TEAM_PASSING: ['pass_yds'],
    RUSHING: ['rush_yds'],
    TEAM_RECEIVING: ['rec_yds'],
    OFFENSIVE_LINE: ['rush_yds']
}

# Whole-number percentages ("55" -> 0.55)
PERCENTAGE_COLUMNS = {
    GAME_STATS: ['third_pct', 'fourth_pct'],
    TEAM_PASSING: ['pass_comp_pct', 'pass_first_pct'],
    RUSHING: ['rush_first_pct'],
    TEAM_RECEIVING: ['rec_first_pct']
}

# "MM:SS" durations converted to fractional minutes
DURATION_COLUMNS = {
    GAME_STATS: ['time_of_poss']
}

# Raw SCORING pages carry two extra columns (6th and 7th) duplicating the
# touchdown breakdown; they are removed before renaming
SCORING_DROPPED_POSITIONS = (5, 6)

# Thousands separator stripped before numeric parsing
THOUSANDS_SEPARATOR = ','

# Cell values treated as missing by the type inference pass
MISSING_VALUE_TOKENS = ('', 'NA')

# Metadata fields attached to every normalized record
METADATA_FIELDS = ['stat', 'season', 'season_type', 'role']

# NFL.com category stats page (archived layout)
NFL_BASE_URL = "http://www.nfl.com"
STATS_URL_TEMPLATE = (
    NFL_BASE_URL + "/stats/categorystats?archive=true&conference=null&role={role_code}"
    "&offensiveStatisticCategory={offensive_category}"
    "&defensiveStatisticCategory={defensive_category}"
    "&season={season}&seasonType={season_type}&tabSeq=2&qualified=false&Submit=Go"
)

# Role codes used by the stats page query string
ROLE_CODES = {
    OFFENSE: 'TM',
    DEFENSE: 'OPP'
}

# User-Agent pool for rotation
USER_AGENT_POOL = [
    # Chrome Windows (most common)
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    # Chrome Mac
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    # Firefox Windows
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:122.0) Gecko/20100101 Firefox/122.0',
    # Firefox Mac
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:122.0) Gecko/20100101 Firefox/122.0'
]

# Default HTTP headers for requests
DEFAULT_HEADERS = {
    'User-Agent': USER_AGENT_POOL[0],
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.9',
    'Accept-Encoding': 'gzip, deflate, br',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1'
}

# Delay between consecutive requests (seconds)
MIN_REQUEST_DELAY = 1.0
MAX_REQUEST_DELAY = 3.0

# HTTP timeout and retry policy
REQUEST_TIMEOUT = 30
MAX_RETRY_ATTEMPTS = 4
