"""
Core functionality for NFL.com team stats parsing

Contains modules for:
- Web scraping and table extraction (scraper.py)
- Generic table structure (table.py)
- Category schemas (schema_registry.py)
- Column selection and renaming (column_processor.py)
- Cell transforms and type inference (data_cleaner.py)
- Normalization pipeline (normalizer.py)
"""

from .scraper import NFLScraper, extract_stats_table
from .table import GenericTable
from .schema_registry import (
    TransformKind,
    ColumnSpec,
    CategorySchema,
    SCHEMA_REGISTRY,
    get_schema,
    lookup,
    canonical_columns
)
from .column_processor import (
    drop_positions,
    select_columns,
    rename_columns
)
from .data_cleaner import (
    strip_thousands_separator,
    parse_numeric,
    parse_percentage,
    parse_duration,
    apply_transform,
    transform_column,
    infer_column_type,
    infer_column_types
)
from .normalizer import (
    CanonicalRecord,
    NormalizeResult,
    RowDiagnostic,
    normalize
)

__all__ = [
    'NFLScraper',
    'extract_stats_table',
    'GenericTable',
    'TransformKind',
    'ColumnSpec',
    'CategorySchema',
    'SCHEMA_REGISTRY',
    'get_schema',
    'lookup',
    'canonical_columns',
    'drop_positions',
    'select_columns',
    'rename_columns',
    'strip_thousands_separator',
    'parse_numeric',
    'parse_percentage',
    'parse_duration',
    'apply_transform',
    'transform_column',
    'infer_column_type',
    'infer_column_types',
    'CanonicalRecord',
    'NormalizeResult',
    'RowDiagnostic',
    'normalize'
]
