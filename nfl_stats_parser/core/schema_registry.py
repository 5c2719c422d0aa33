"""
Schema registry for NFL.com team statistics tables

Maps a (category, role) pair to the ordered list of canonical columns and
the transform applied to each of them. The registry is built once at import
time from the column lists in constants.py and is read-only afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .. import constants
from ..exceptions import UnknownCategory, UnknownRoleVariant


class TransformKind(Enum):
    """Conversion applied to a column after positional renaming"""

    IDENTITY = 'identity'
    NUMERIC = 'numeric'
    PERCENTAGE = 'percentage'
    DURATION_MM_SS = 'duration_mm_ss'
    COMMA_STRIPPED_NUMERIC = 'comma_stripped_numeric'
    # No explicit conversion, type decided by the inference pass
    AUTO = 'auto'


@dataclass(frozen=True)
class ColumnSpec:
    position: int
    canonical_name: str
    transform: TransformKind = TransformKind.AUTO


@dataclass(frozen=True)
class CategorySchema:
    """
    Column layouts of one statistics category

    Attributes:
        category: Category name (e.g. 'RUSHING')
        role_variants: role -> ordered ColumnSpec tuple
        dropped_positions: Raw column positions removed before renaming
    """

    category: str
    role_variants: Mapping[str, Tuple[ColumnSpec, ...]]
    dropped_positions: Tuple[int, ...] = field(default_factory=tuple)


def _transform_for(category: str, column: str) -> TransformKind:
    if column in constants.IDENTITY_COLUMNS:
        return TransformKind.IDENTITY
    if column in constants.DURATION_COLUMNS.get(category, []):
        return TransformKind.DURATION_MM_SS
    if column in constants.PERCENTAGE_COLUMNS.get(category, []):
        return TransformKind.PERCENTAGE
    if column in constants.COMMA_STRIPPED_COLUMNS.get(category, []):
        return TransformKind.COMMA_STRIPPED_NUMERIC
    return TransformKind.AUTO


def build_column_specs(category: str, columns: List[str]) -> Tuple[ColumnSpec, ...]:
    """
    Build ColumnSpec tuple for a category from its canonical column names

    Args:
        category: Category name
        columns: Canonical column names in page order

    Returns:
        Tuple of ColumnSpec, one per column
    """
    return tuple(
        ColumnSpec(position=i, canonical_name=name, transform=_transform_for(category, name))
        for i, name in enumerate(columns)
    )


def _build_registry() -> Dict[str, CategorySchema]:
    layouts = {
        constants.GAME_STATS: (constants.GAME_STATS_COLUMNS, constants.GAME_STATS_DEFENSE_COLUMNS),
        constants.SCORING: (constants.SCORING_COLUMNS, constants.SCORING_COLUMNS),
        constants.TEAM_PASSING: (constants.TEAM_PASSING_COLUMNS, constants.TEAM_PASSING_COLUMNS),
        constants.RUSHING: (constants.RUSHING_COLUMNS, constants.RUSHING_COLUMNS),
        constants.TEAM_RECEIVING: (constants.TEAM_RECEIVING_COLUMNS, constants.TEAM_RECEIVING_COLUMNS),
        constants.OFFENSIVE_LINE: (constants.OFFENSIVE_LINE_COLUMNS, constants.OFFENSIVE_LINE_COLUMNS),
    }

    registry = {}
    for category, (offense_columns, defense_columns) in layouts.items():
        dropped = constants.SCORING_DROPPED_POSITIONS if category == constants.SCORING else ()
        registry[category] = CategorySchema(
            category=category,
            role_variants=MappingProxyType({
                constants.OFFENSE: build_column_specs(category, offense_columns),
                constants.DEFENSE: build_column_specs(category, defense_columns),
            }),
            dropped_positions=dropped
        )
    return registry


SCHEMA_REGISTRY: Mapping[str, CategorySchema] = MappingProxyType(_build_registry())


def get_schema(category: str) -> CategorySchema:
    """
    Get the full schema of a category

    Raises:
        UnknownCategory: If category is not supported
    """
    try:
        return SCHEMA_REGISTRY[category]
    except (KeyError, TypeError):
        raise UnknownCategory(category) from None


def lookup(category: str, role: str) -> Tuple[ColumnSpec, ...]:
    """
    Get ordered column specs for a category/role pair

    Args:
        category: One of constants.SUPPORTED_STATS
        role: 'offense' or 'defense'

    Returns:
        Tuple of ColumnSpec in page order

    Raises:
        UnknownCategory: If category is not supported
        UnknownRoleVariant: If category has no layout for role
    """
    schema = get_schema(category)
    try:
        return schema.role_variants[role]
    except (KeyError, TypeError):
        raise UnknownRoleVariant(category, role) from None


def canonical_columns(category: str, role: str) -> List[str]:
    """Canonical column names for a category/role pair, in output order"""
    return [spec.canonical_name for spec in lookup(category, role)]
