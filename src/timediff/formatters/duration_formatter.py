from typing import TYPE_CHECKING, List, Optional

from timediff.errors import UnsupportedFormatError
from timediff.formatters.iso_formatter import format_iso_duration
from timediff.i18n import ResourceTable, default_table, ensure_initialized, plural_key, resolve_locale
from timediff.util import UNITS

if TYPE_CHECKING:
    from timediff.models import Breakdown

FORMATS = ('short', 'long', 'iso')

# Single-letter unit suffixes for the short format, per locale
SHORT_SUFFIXES = {
    'en': {'days': 'd', 'hours': 'h', 'minutes': 'm', 'seconds': 's'},
    'ru': {'days': 'д', 'hours': 'ч', 'minutes': 'м', 'seconds': 'с'},
}


class DurationFormatter:
    """Format duration breakdowns as localized text"""

    @staticmethod
    def format_duration(
        breakdown: "Breakdown",
        locale: str = '',
        format: str = 'long',
        base_unit: str = 'seconds',
        table: Optional[ResourceTable] = None,
    ) -> str:
        """
        Format a breakdown into human-readable text

        Args:
            breakdown: Days/hours/minutes/seconds to render
            locale: 'en' or 'ru' (or a tag like 'ru-RU'); detected when empty
            format: 'long' ("1 day, 2 hours"), 'short' ("1d 2h") or 'iso' ("P1DT2H0M0S")
            base_unit: Unit used to render a zero duration ("0 seconds")
            table: Resource table to read templates from; defaults to the shared one

        Returns:
            Formatted string (e.g., "1 день, 12 часов, 30 минут, 15 секунд", "1d 12h 30m 15s")
        """
        if format not in FORMATS:
            raise UnsupportedFormatError(f"Unsupported format {format!r}, expected one of {', '.join(FORMATS)}")
        if base_unit not in UNITS:
            raise UnsupportedFormatError(f"Unsupported base unit {base_unit!r}, expected one of {', '.join(UNITS)}")

        if format == 'iso':
            return format_iso_duration(breakdown)

        table = ensure_initialized(table if table is not None else default_table)
        locale = resolve_locale(locale)

        if breakdown.is_zero():
            return DurationFormatter._format_unit(table, locale, base_unit, 0)

        if format == 'short':
            return " ".join(DurationFormatter._short_parts(locale, breakdown))
        return ", ".join(DurationFormatter._long_parts(table, locale, breakdown))

    @staticmethod
    def _format_unit(table: ResourceTable, locale: str, unit: str, count: int) -> str:
        """Pluralized unit, e.g. "5 дней" """
        return table.translate(locale, plural_key(locale, unit, count), count)

    @staticmethod
    def _long_parts(table: ResourceTable, locale: str, breakdown: "Breakdown") -> List[str]:
        return [
            DurationFormatter._format_unit(table, locale, unit, value)
            for unit, value in breakdown.units()
            if value > 0
        ]

    @staticmethod
    def _short_parts(locale: str, breakdown: "Breakdown") -> List[str]:
        # No pluralization, single-letter suffixes
        suffixes = SHORT_SUFFIXES.get(locale, SHORT_SUFFIXES['en'])
        return [
            f"{value}{suffixes[unit]}"
            for unit, value in breakdown.units()
            if value > 0
        ]
