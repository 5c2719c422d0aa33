#!/usr/bin/env python3
"""
NFL.com team stats parser - CLI entry point

This script provides a command-line interface for scraping team-level
statistics from NFL.com using the TeamStatsParser class from the
nfl_stats_parser package. The normalized table is written to stdout as CSV.
"""

import argparse
import logging
import sys

import requests

from nfl_stats_parser import TeamStatsParser
from nfl_stats_parser.constants import ROLES, SEASON_TYPES, SUPPORTED_STATS
from nfl_stats_parser.exceptions import NFLStatsError


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description='Scrape NFL.com team statistics into a clean CSV table',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --stats GAME_STATS --season 2018                    # Offense game stats 2018
  %(prog)s --stats TEAM_PASSING --season 2014 --role defense    # Passing allowed 2014
  %(prog)s --stats SCORING --season 2019 --season-type Playoffs
        """
    )

    parser.add_argument('--stats',
                        choices=SUPPORTED_STATS,
                        default='GAME_STATS',
                        help='Statistics category (default: GAME_STATS)')
    parser.add_argument('--season',
                        type=int,
                        default=2019,
                        help='Season year, 1970 or later (default: 2019)')
    parser.add_argument('--role',
                        choices=ROLES,
                        default='offense',
                        help='offense or defense (default: offense)')
    parser.add_argument('--season-type',
                        choices=list(SEASON_TYPES),
                        default='Regular',
                        help='Regular or Playoffs (default: Regular)')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None, parser_factory=TeamStatsParser):
    """Run the CLI; returns the process exit code"""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    try:
        result = parser_factory().parse(
            stats=args.stats,
            season=args.season,
            role=args.role,
            season_type=args.season_type
        )
    except (NFLStatsError, requests.RequestException) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    result.to_dataframe().to_csv(sys.stdout, index=False)

    print(f"✅ {len(result)} rows parsed", file=sys.stderr)
    if result.skipped_rows:
        print(f"⚠️ {result.skipped_rows} rows skipped:", file=sys.stderr)
        for diagnostic in result.diagnostics:
            print(f"  - row {diagnostic.row_index}: {diagnostic.error}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
