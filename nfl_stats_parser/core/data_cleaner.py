"""
Data cleaning utilities for NFL.com statistics

This module provides the column transforms and the column type inference
pass used by the normalizer:
- Thousands separator removal and numeric parsing
- Whole-number percentage scaling
- "MM:SS" duration conversion to fractional minutes
- Best-effort int > float > string column type inference

Every transform works on a whole pandas Series and returns the converted
values together with a mask of the cells that could not be converted.
"""

from typing import Callable, Dict, Iterable, Tuple

import pandas as pd

from ..constants import MISSING_VALUE_TOKENS, THOUSANDS_SEPARATOR
from ..exceptions import CellParseError, DurationParseError, NumericParseError
from .schema_registry import TransformKind


DURATION_PATTERN = r'^(\d+):(\d{1,2})$'
DECIMAL_MARKERS = r'[.eE]'


def _as_text(series: pd.Series) -> pd.Series:
    return series.astype('string').str.strip()


def _to_float(text: pd.Series) -> pd.Series:
    return pd.to_numeric(text.fillna('').astype(object), errors='coerce').astype('float64')


def strip_thousands_separator(value: str) -> str:
    """
    Remove thousands separators from a numeric string

    "12,345,678" -> "12345678"
    """
    return str(value).replace(THOUSANDS_SEPARATOR, '').strip()


def missing_mask(series: pd.Series) -> pd.Series:
    """Cells counted as missing: None/NaN, empty strings and 'NA'"""
    text = _as_text(series)
    return (series.isna() | text.isin(list(MISSING_VALUE_TOKENS))).astype(bool)


def coerce_numeric(series: pd.Series) -> pd.Series:
    """
    Parse a column as numbers after stripping thousands separators

    Unparseable or infinite cells become NaN.

    Args:
        series: Column of strings or numbers

    Returns:
        float64 Series
    """
    if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
        numbers = pd.to_numeric(series, errors='coerce').astype('float64')
    else:
        numbers = _to_float(_as_text(series).str.replace(THOUSANDS_SEPARATOR, '', regex=False))
    return numbers.where(numbers.abs() != float('inf'))


def numeric_column(series: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """
    Convert a column to doubles, thousands separators removed

    Returns:
        (float64 values, mask of cells that are not numbers)
    """
    numbers = coerce_numeric(series)
    return numbers, numbers.isna()


def percentage_column(series: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """
    Convert whole-number percentages to ratios ("55" -> 0.55)

    Returns:
        (float64 values, mask of cells that are not numbers)
    """
    numbers, bad = numeric_column(series)
    return numbers / 100, bad


def duration_column(series: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """
    Convert "MM:SS" durations to total fractional minutes

    "14:32" -> 14 + 32 / 60; seconds must be below 60.

    Returns:
        (float64 values, mask of malformed cells)
    """
    parts = _as_text(series).str.extract(DURATION_PATTERN)
    minutes = _to_float(parts[0])
    seconds = _to_float(parts[1])

    bad = (minutes.isna() | seconds.isna() | (seconds >= 60)).astype(bool)
    values = (minutes + seconds / 60).where(~bad)
    return values, bad


def identity_column(series: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """Keep a column untouched"""
    return series.copy(), pd.Series(False, index=series.index)


# Column transforms; AUTO columns are left as text for type inference
COLUMN_TRANSFORMS: Dict[TransformKind, Callable[[pd.Series], Tuple[pd.Series, pd.Series]]] = {
    TransformKind.IDENTITY: identity_column,
    TransformKind.AUTO: identity_column,
    TransformKind.NUMERIC: numeric_column,
    TransformKind.COMMA_STRIPPED_NUMERIC: numeric_column,
    TransformKind.PERCENTAGE: percentage_column,
    TransformKind.DURATION_MM_SS: duration_column,
}


def transform_column(kind: TransformKind, series: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """
    Apply one transform kind to a whole column

    Returns:
        (converted values, boolean mask of cells that failed to convert)
    """
    return COLUMN_TRANSFORMS[kind](series)


def cell_error(kind: TransformKind, column: str, value) -> CellParseError:
    """Error describing a cell that failed the given transform"""
    if kind is TransformKind.DURATION_MM_SS:
        return DurationParseError(column, value)
    return NumericParseError(column, value)


def apply_transform(kind: TransformKind, value: str, column: str = None):
    """
    Apply one transform kind to one cell

    Raises:
        NumericParseError, DurationParseError: On malformed cells
    """
    values, bad = transform_column(kind, pd.Series([value], dtype=object))
    if bad.iloc[0]:
        raise cell_error(kind, column, value)

    result = values.iloc[0]
    return float(result) if kind not in (TransformKind.IDENTITY, TransformKind.AUTO) else result


def parse_numeric(value: str, column: str = None) -> float:
    """
    Parse a cell as a double after stripping thousands separators

    Raises:
        NumericParseError: If the cleaned value is not a number
    """
    return apply_transform(TransformKind.NUMERIC, value, column)


def parse_percentage(value: str, column: str = None) -> float:
    """
    Parse a whole-number percentage into a ratio

    Raises:
        NumericParseError: If the value is not a number
    """
    return apply_transform(TransformKind.PERCENTAGE, value, column)


def parse_duration(value: str, column: str = None) -> float:
    """
    Convert a "MM:SS" duration into total fractional minutes

    Raises:
        DurationParseError: If the value is not MM:SS or seconds >= 60
    """
    return apply_transform(TransformKind.DURATION_MM_SS, value, column)


def is_missing(value) -> bool:
    """Check whether a single cell counts as missing for type inference"""
    return bool(missing_mask(pd.Series([value], dtype=object)).iloc[0])


def infer_column_type(series: pd.Series) -> pd.Series:
    """
    Auto-detect the type of a column

    Precedence is int > float > string. Thousands separators are ignored.
    If every present cell is a whole number written without a decimal point
    the column becomes nullable Int64, else if every present cell is a
    number it becomes float64, else it is left untouched. Missing cells
    become <NA>/NaN. Numeric columns keep their dtype (floats never turn
    into ints), so applying the pass twice gives the same result.

    Args:
        series: Column values

    Returns:
        New Series with the inferred dtype
    """
    if pd.api.types.is_integer_dtype(series) and not pd.api.types.is_bool_dtype(series):
        return series.astype('Int64')
    if pd.api.types.is_float_dtype(series):
        return series.astype('float64')

    missing = missing_mask(series)
    if missing.all():
        return series.copy()

    numbers = coerce_numeric(series)
    text_cells = numbers.isna() & ~missing
    if text_cells.any():
        return series.copy()

    present = ~missing
    written_as_decimal = _as_text(series).str.contains(DECIMAL_MARKERS, regex=True, na=False).astype(bool)
    is_whole = (numbers[present] % 1 == 0).all()

    if is_whole and not written_as_decimal[present].any():
        return numbers.astype('Int64')
    return numbers


def infer_column_types(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Run type inference over selected columns of a DataFrame

    Args:
        df: DataFrame
        columns: Columns to infer

    Returns:
        DataFrame with inferred columns replaced
    """
    df = df.copy()
    for col in columns:
        if col in df.columns:
            df[col] = infer_column_type(df[col])
    return df
