"""timediff - duration value type with ISO 8601 and localized formatting"""
from timediff.core import TimeDiff
from timediff.errors import (
    InvalidConstructorArguments,
    InvalidDurationFormat,
    MissingResourceError,
    TimeDiffError,
    UnsupportedFormatError,
)
from timediff.i18n import ResourceTable, default_table, detect_language
from timediff.models import Breakdown, FromInstants, FromISOText, FromMilliseconds

__all__ = [
    "TimeDiff",
    "Breakdown",
    "FromInstants",
    "FromISOText",
    "FromMilliseconds",
    "ResourceTable",
    "default_table",
    "detect_language",
    "TimeDiffError",
    "InvalidConstructorArguments",
    "InvalidDurationFormat",
    "MissingResourceError",
    "UnsupportedFormatError",
]
