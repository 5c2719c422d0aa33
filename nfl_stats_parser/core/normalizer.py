"""
Statistics table normalization for NFL.com team stats

Turns a raw GenericTable into canonical records:
1. Resolve the column specs of the (category, role) pair
2. Validate shape and drop category-specific raw columns
3. Discard the header row and rename cells positionally
4. Apply per-column transforms (row dropped on malformed cells)
5. Infer int/float/string types of the remaining text columns
6. Attach request metadata to every record, keeping source order

The normalizer is pure: no I/O and no shared mutable state.
"""

import logging
from collections import abc
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

import pandas as pd

from ..constants import METADATA_FIELDS
from .column_processor import rename_columns, select_columns
from .data_cleaner import cell_error, infer_column_types, transform_column
from .schema_registry import TransformKind, get_schema, lookup
from .table import GenericTable


logger = logging.getLogger(__name__)


class CanonicalRecord(abc.Mapping):
    """Immutable mapping of canonical column name -> typed value plus metadata"""

    __slots__ = ('_fields',)

    def __init__(self, fields: Mapping[str, Any]):
        self._fields = MappingProxyType(dict(fields))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"CanonicalRecord({dict(self._fields)!r})"

    @property
    def stat(self) -> str:
        return self._fields['stat']

    @property
    def season(self) -> Union[int, str]:
        return self._fields['season']

    @property
    def season_type(self) -> str:
        return self._fields['season_type']

    @property
    def role(self) -> str:
        return self._fields['role']


@dataclass(frozen=True)
class RowDiagnostic:
    """
    A cell that could not be converted

    Attributes:
        row_index: Position of the row in the source table (header is 0)
        column: Canonical column name
        value: Raw cell value
        error: Error message
    """

    row_index: int
    column: str
    value: str
    error: str



@dataclass(frozen=True)
class NormalizeResult:
    records: Tuple[CanonicalRecord, ...]
    diagnostics: Tuple[RowDiagnostic, ...]
    columns: Tuple[str, ...]
    frame: Optional[pd.DataFrame] = field(default=None, compare=False, repr=False)

    @property
    def skipped_rows(self) -> int:
        """Number of source rows excluded because of cell errors"""
        return len({d.row_index for d in self.diagnostics})

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CanonicalRecord]:
        return iter(self.records)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Records as a pandas DataFrame with columns in canonical order

        Inferred integer columns keep the nullable Int64 dtype, so a missing
        cell shows as <NA> instead of turning the column into floats.
        """
        if self.frame is not None:
            return self.frame.copy()
        return pd.DataFrame([dict(record) for record in self.records], columns=list(self.columns))


def _records_from_frame(df: pd.DataFrame) -> Tuple[CanonicalRecord, ...]:
    # Python scalars with None for missing cells
    plain = df.astype(object).where(df.notna(), None)
    return tuple(CanonicalRecord(row) for row in plain.to_dict(orient='records'))


def normalize(table: GenericTable, category: str, role: str,
              season: Union[int, str], season_type: str) -> NormalizeResult:
    """
    Normalize a raw statistics table into canonical records

    Args:
        table: Raw table, header row first
        category: One of constants.SUPPORTED_STATS
        role: 'offense' or 'defense'
        season: Season year
        season_type: 'REG' or 'POST'

    Returns:
        NormalizeResult with records in source order and row diagnostics

    Raises:
        UnknownCategory: If category is not supported
        UnknownRoleVariant: If category has no layout for role
        ShapeMismatch: If the table width does not fit the schema
    """
    specs = lookup(category, role)
    schema = get_schema(category)

    rows = select_columns(table, schema, role, specs)
    raw_df = rename_columns(rows[1:], specs)

    converted = {}
    bad_cells = {}
    for spec in specs:
        name = spec.canonical_name
        converted[name], bad_cells[name] = transform_column(spec.transform, raw_df[name])
    bad = pd.DataFrame(bad_cells, index=raw_df.index)
    bad_rows = bad.any(axis=1)

    diagnostics = []
    for offset in raw_df.index[bad_rows.to_numpy()]:
        # +1 for the discarded header row
        row_index = int(offset) + 1
        for spec in specs:
            name = spec.canonical_name
            if not bad.at[offset, name]:
                continue
            value = raw_df.at[offset, name]
            error = str(cell_error(spec.transform, name, value))
            logger.warning(f"Skipping {category} row {row_index}: {error}")
            diagnostics.append(RowDiagnostic(row_index=row_index, column=name, value=value, error=error))

    df = pd.DataFrame(converted, index=raw_df.index)
    df = df.loc[~bad_rows].reset_index(drop=True)

    auto_columns = [spec.canonical_name for spec in specs if spec.transform is TransformKind.AUTO]
    df = infer_column_types(df, auto_columns)

    metadata = {
        'stat': category,
        'season': season,
        'season_type': season_type,
        'role': role
    }
    names = [spec.canonical_name for spec in specs]
    df = df.assign(**metadata)[names + METADATA_FIELDS]
    records = _records_from_frame(df)

    if diagnostics:
        logger.warning(f"{category}/{role}: skipped {int(bad_rows.sum())} "
                       f"of {len(raw_df)} rows with malformed cells")
    logger.info(f"Normalized {len(records)} {category} rows for {role} {season} {season_type}")

    return NormalizeResult(
        records=records,
        diagnostics=tuple(diagnostics),
        columns=tuple(df.columns),
        frame=df
    )
