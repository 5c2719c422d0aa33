"""
Exception hierarchy for NFL.com statistics parsing

Request-level errors (RequestError subclasses) abort a whole call.
Cell-level errors (CellParseError subclasses) are raised by the per-cell
transforms and collected by the normalizer as row diagnostics.
"""


class NFLStatsError(Exception):
    """Base class for all parser errors"""


class RequestError(NFLStatsError):
    """Request-level error, fatal to the call"""


class UnknownCategory(RequestError):
    """Statistic category is not one of the supported categories"""

    def __init__(self, category):
        self.category = category
        super().__init__(f"Unknown stats category: {category!r}")


class UnknownRoleVariant(RequestError):
    """Category has no column layout for the requested role"""

    def __init__(self, category, role):
        self.category = category
        self.role = role
        super().__init__(f"Unknown role {role!r} for stats category {category}")


class ShapeMismatch(RequestError):
    """Table width does not match the category schema"""

    def __init__(self, category, role, expected, actual):
        self.category = category
        self.role = role
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Table shape mismatch for {category}/{role}: "
            f"expected {expected} columns, got {actual}"
        )


class InvalidRequest(RequestError):
    """Request parameter failed validation"""

    def __init__(self, parameter, value, reason):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter} {value!r}: {reason}")


class CellParseError(NFLStatsError):
    """A single cell could not be converted"""

    def __init__(self, column, value, message=None):
        self.column = column
        self.value = value
        super().__init__(message or f"Cannot parse {value!r} in column {column}")


class NumericParseError(CellParseError):
    """Cell is not a valid number"""

    def __init__(self, column, value):
        super().__init__(column, value, f"Cannot parse {value!r} in column {column} as a number")


class DurationParseError(CellParseError):
    """Cell is not a valid MM:SS duration"""

    def __init__(self, column, value):
        super().__init__(column, value, f"Cannot parse {value!r} in column {column} as MM:SS")


class TableNotFound(NFLStatsError):
    """Page contains no statistics table"""

    def __init__(self, source):
        self.source = source
        super().__init__(f"No statistics table found in {source}")
