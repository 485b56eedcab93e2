# Data models for TimeDiff construction and breakdown
from datetime import datetime, timedelta
from typing import Any, Annotated, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError
import logging

from timediff.config import TIMEZONE
from timediff.errors import InvalidConstructorArguments
from timediff.formatters.iso_formatter import parse_iso_duration
from timediff.util import DAY, HOUR, MINUTE, SECOND, UNIT_MILLISECONDS, UNITS

logger = logging.getLogger(__name__)


class Breakdown(BaseModel):
    """Days/hours/minutes/seconds decomposition of a millisecond magnitude"""
    model_config = ConfigDict(frozen=True)

    days: NonNegativeInt = 0
    hours: NonNegativeInt = 0
    minutes: NonNegativeInt = 0
    seconds: NonNegativeInt = 0

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Breakdown":
        """Split a magnitude into units, discarding the sub-second remainder"""
        days, remaining = divmod(milliseconds, DAY)
        hours, remaining = divmod(remaining, HOUR)
        minutes, remaining = divmod(remaining, MINUTE)
        seconds = remaining // SECOND
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_milliseconds(self) -> int:
        return sum(value * UNIT_MILLISECONDS[unit] for unit, value in self.units())

    def units(self) -> List[Tuple[str, int]]:
        """(unit, value) pairs in days, hours, minutes, seconds order"""
        return [(unit, getattr(self, unit)) for unit in UNITS]

    def is_zero(self) -> bool:
        return not any(value for _, value in self.units())


class FromInstants(BaseModel):
    """Absolute difference between two instants"""
    model_config = ConfigDict(frozen=True, strict=True)

    kind: Literal['instants'] = 'instants'
    start: datetime
    end: datetime

    @staticmethod
    def _as_aware(instant: datetime) -> datetime:
        if instant.tzinfo is None or instant.utcoffset() is None:
            return TIMEZONE.localize(instant)
        return instant

    def to_milliseconds(self) -> int:
        delta = abs(self._as_aware(self.end) - self._as_aware(self.start))
        return delta // timedelta(milliseconds=1)


class FromMilliseconds(BaseModel):
    """Literal millisecond magnitude"""
    model_config = ConfigDict(frozen=True)

    kind: Literal['milliseconds'] = 'milliseconds'
    milliseconds: Annotated[int, Field(strict=True, ge=0)]

    def to_milliseconds(self) -> int:
        return self.milliseconds


class FromISOText(BaseModel):
    """ISO 8601 duration text, P{d}DT{h}H{m}M{s}S"""
    model_config = ConfigDict(frozen=True, strict=True)

    kind: Literal['iso'] = 'iso'
    text: str

    def to_milliseconds(self) -> int:
        return parse_iso_duration(self.text)


TimeDiffSource = Annotated[
    Union[FromInstants, FromMilliseconds, FromISOText],
    Field(discriminator='kind'),
]


def parse_arguments(arg1: Any, arg2: Optional[Any] = None) -> TimeDiffSource:
    """
    Map TimeDiff constructor arguments to one of the source variants

    Args:
        arg1: First datetime, millisecond count or ISO 8601 duration text
        arg2: Second datetime, only valid when arg1 is a datetime

    Raises:
        InvalidConstructorArguments: if the arguments match no variant
    """
    try:
        if isinstance(arg1, str):
            if arg2 is not None:
                raise InvalidConstructorArguments("ISO 8601 text takes no second argument")
            return FromISOText(text=arg1)

        if isinstance(arg1, int) and not isinstance(arg1, bool):
            if arg2 is not None:
                raise InvalidConstructorArguments("Milliseconds take no second argument")
            return FromMilliseconds(milliseconds=arg1)

        if isinstance(arg1, datetime) and isinstance(arg2, datetime):
            return FromInstants(start=arg1, end=arg2)
    except ValidationError as e:
        logger.debug(f"Rejected TimeDiff arguments {arg1!r}, {arg2!r}: {e}")
        raise InvalidConstructorArguments(f"Invalid constructor arguments: {e.errors()[0]['msg']}") from e

    raise InvalidConstructorArguments(
        f"Invalid constructor arguments: expected two datetimes, an int or a str, "
        f"got {type(arg1).__name__} and {type(arg2).__name__}"
    )
