"""Formatters for durations"""
from .iso_formatter import format_iso_duration, parse_iso_duration
from .duration_formatter import DurationFormatter

__all__ = ["DurationFormatter", "format_iso_duration", "parse_iso_duration"]
