"""sqltag: composable SQL fragments with bind values for Python."""

from sqltag.builders import bulk, empty, join, raw
from sqltag.dialect import Dialect
from sqltag.exceptions import (
    ArityError,
    EmptyListError,
    ListValueError,
    NonUniformLengthError,
    SqltagError,
)
from sqltag.fragment import BIND_PARAM, Fragment, FragmentSnapshot, Query, format_sql, sql
from sqltag.validation import check_in_lists

__all__ = [
    "BIND_PARAM",
    "ArityError",
    "Dialect",
    "EmptyListError",
    "Fragment",
    "FragmentSnapshot",
    "ListValueError",
    "NonUniformLengthError",
    "Query",
    "SqltagError",
    "bulk",
    "check_in_lists",
    "empty",
    "format_sql",
    "join",
    "raw",
    "sql",
]
