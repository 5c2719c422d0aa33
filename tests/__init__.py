"""Test package for nfl_stats_parser."""
