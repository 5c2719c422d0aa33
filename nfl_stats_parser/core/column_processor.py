"""
Column processing utilities for NFL.com statistics

This module provides functions for:
- Validating table shape against a category schema
- Removing category-specific raw columns (SCORING)
- Positional renaming to canonical column names
"""

import logging
from typing import List, Sequence, Tuple

import pandas as pd

from ..exceptions import ShapeMismatch
from .schema_registry import CategorySchema, ColumnSpec
from .table import GenericTable


logger = logging.getLogger(__name__)


def drop_positions(row: Sequence[str], positions: Sequence[int]) -> Tuple[str, ...]:
    """
    Remove cells at the given positions from a row

    Args:
        row: Row cells
        positions: 0-based positions to remove

    Returns:
        Row without those cells
    """
    return tuple(cell for i, cell in enumerate(row) if i not in positions)


def select_columns(table: GenericTable, schema: CategorySchema, role: str,
                   specs: Sequence[ColumnSpec]) -> List[Tuple[str, ...]]:
    """
    Validate table shape and keep only the columns covered by the schema

    Every row must have the same width. For categories with dropped
    positions (SCORING) a raw row wider by the number of dropped positions
    has those cells removed; a row already of schema width is kept as is.

    Args:
        table: Raw table including its header row
        schema: Category schema
        role: Role the specs belong to
        specs: Column specs for the role

    Returns:
        All rows (header included) reduced to the schema width

    Raises:
        ShapeMismatch: If the table is empty, ragged or of the wrong width
    """
    expected = len(specs)

    if table.row_count == 0:
        raise ShapeMismatch(schema.category, role, expected, 0)

    widths = table.row_widths()
    width = widths[0]
    if len(widths) > 1:
        logger.error(f"Ragged {schema.category} table: row widths {widths}")
        raise ShapeMismatch(schema.category, role, expected, widths)

    dropped = schema.dropped_positions
    if dropped and width == expected + len(dropped):
        logger.debug(f"Dropping raw positions {list(dropped)} from {schema.category} table")
        return [drop_positions(row, dropped) for row in table.rows]

    if width != expected:
        raise ShapeMismatch(schema.category, role, expected, width)

    return list(table.rows)


def rename_columns(rows: Sequence[Sequence[str]], specs: Sequence[ColumnSpec]) -> pd.DataFrame:
    """
    Assign canonical names to row cells by position

    Args:
        rows: Data rows (header already removed), each of schema width
        specs: Column specs in page order

    Returns:
        DataFrame of raw string cells with canonical column names
    """
    names = [spec.canonical_name for spec in sorted(specs, key=lambda s: s.position)]
    return pd.DataFrame([list(row) for row in rows], columns=names, dtype=object)
