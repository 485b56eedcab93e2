import functools
from datetime import timedelta
from typing import Any, Optional

from timediff.config import DEFAULT_BASE_UNIT
from timediff.errors import InvalidDurationFormat
from timediff.formatters import DurationFormatter, format_iso_duration
from timediff.i18n import ResourceTable
from timediff.models import Breakdown, FromMilliseconds, TimeDiffSource, parse_arguments


@functools.total_ordering
class TimeDiff:
    """
    Immutable, non-negative duration measured in milliseconds

    Constructed from two datetimes (absolute difference), a millisecond
    count, or ISO 8601 duration text:

        TimeDiff(datetime(2023, 1, 1), datetime(2023, 1, 2, 12, 30, 15))
        TimeDiff(90123000)
        TimeDiff("P1DT1H2M3S")
    """

    __slots__ = ('_milliseconds',)

    def __init__(self, arg1: Any, arg2: Optional[Any] = None):
        source = parse_arguments(arg1, arg2)
        self._milliseconds = source.to_milliseconds()

    @classmethod
    def from_source(cls, source: TimeDiffSource) -> "TimeDiff":
        """Build from an already validated source variant"""
        instance = cls.__new__(cls)
        instance._milliseconds = source.to_milliseconds()
        return instance

    @classmethod
    def _from_milliseconds(cls, milliseconds: int) -> "TimeDiff":
        return cls.from_source(FromMilliseconds(milliseconds=milliseconds))

    @classmethod
    def from_iso(cls, iso_string: str) -> "TimeDiff":
        """
        Create a TimeDiff from an ISO 8601 duration string "P[n]DT[n]H[n]M[n]S"

        Raises:
            InvalidDurationFormat: if the text does not match
        """
        if not isinstance(iso_string, str):
            raise InvalidDurationFormat(f"Expected ISO 8601 duration text, got {type(iso_string).__name__}")
        return cls(iso_string)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "TimeDiff":
        """Magnitude of delta, floored to whole milliseconds"""
        return cls._from_milliseconds(abs(delta) // timedelta(milliseconds=1))

    def breakdown(self) -> Breakdown:
        """Days, hours, minutes and seconds; the sub-second remainder is dropped"""
        return Breakdown.from_milliseconds(self._milliseconds)

    def to_iso(self) -> str:
        return format_iso_duration(self.breakdown())

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self._milliseconds)

    def humanize(
        self,
        locale: str = '',
        format: str = 'long',
        base_unit: Optional[str] = None,
        table: Optional[ResourceTable] = None,
    ) -> str:
        """
        Format as localized text

        Args:
            locale: 'en' or 'ru'; detected from the configured locale hint when empty
            format: 'long' ("2 days, 3 hours"), 'short' ("2d 3h") or 'iso'
            base_unit: Unit for a zero duration; defaults to TIMEDIFF_BASE_UNIT
            table: Resource table override, e.g. one owned by the host application
        """
        return DurationFormatter.format_duration(
            self.breakdown(),
            locale=locale,
            format=format,
            base_unit=base_unit or DEFAULT_BASE_UNIT,
            table=table,
        )

    def value_of(self) -> int:
        """Magnitude in milliseconds"""
        return self._milliseconds

    @staticmethod
    def add(a: "TimeDiff", b: "TimeDiff") -> "TimeDiff":
        """Sum of two durations"""
        return TimeDiff._from_milliseconds(a._milliseconds + b._milliseconds)

    @staticmethod
    def subtract(a: "TimeDiff", b: "TimeDiff") -> "TimeDiff":
        """Distance between two durations, never negative"""
        return TimeDiff._from_milliseconds(abs(a._milliseconds - b._milliseconds))

    def plus(self, other: "TimeDiff") -> "TimeDiff":
        return TimeDiff.add(self, other)

    def minus(self, other: "TimeDiff") -> "TimeDiff":
        return TimeDiff.subtract(self, other)

    def __add__(self, other: "TimeDiff") -> "TimeDiff":
        if not isinstance(other, TimeDiff):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "TimeDiff") -> "TimeDiff":
        if not isinstance(other, TimeDiff):
            return NotImplemented
        return self.minus(other)

    def __int__(self) -> int:
        return self._milliseconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeDiff):
            return NotImplemented
        return self._milliseconds == other._milliseconds

    def __lt__(self, other: "TimeDiff") -> bool:
        if not isinstance(other, TimeDiff):
            return NotImplemented
        return self._milliseconds < other._milliseconds

    def __hash__(self) -> int:
        return hash(self._milliseconds)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, '_milliseconds'):
            raise AttributeError("TimeDiff is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"TimeDiff({self.to_iso()!r}, milliseconds={self._milliseconds})"

    def __str__(self) -> str:
        return self.to_iso()
