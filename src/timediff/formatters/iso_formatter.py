import re
from typing import TYPE_CHECKING

from timediff.errors import InvalidDurationFormat
from timediff.util import DAY, HOUR, MINUTE, SECOND

if TYPE_CHECKING:
    from timediff.models import Breakdown

# The T separator is mandatory even when no time components follow it
ISO_DURATION_PATTERN = re.compile(r'P(?:(\d+)D)?T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?', re.ASCII)


def parse_iso_duration(text: str) -> int:
    """
    Parse an ISO 8601 duration of the form P[n]DT[n]H[n]M[n]S

    Args:
        text: Duration text, e.g. "P1DT1H2M3S" or "PT90M"

    Returns:
        Magnitude in milliseconds

    Raises:
        InvalidDurationFormat: if the whole text does not match the pattern
    """
    match = ISO_DURATION_PATTERN.fullmatch(text)
    if not match:
        raise InvalidDurationFormat(f"Invalid ISO 8601 duration format: {text!r}")

    days, hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return days * DAY + hours * HOUR + minutes * MINUTE + seconds * SECOND


def format_iso_duration(breakdown: "Breakdown") -> str:
    """Format a breakdown as P{d}DT{h}H{m}M{s}S, zero components included"""
    return f"P{breakdown.days}DT{breakdown.hours}H{breakdown.minutes}M{breakdown.seconds}S"
