"""Localization resources and plural rules"""
from .detection import detect_language, normalize_locale, resolve_locale
from .plural import PluralClass, plural_class, plural_key
from .resources import BUILTIN_RESOURCES, ResourceTable, default_table, ensure_initialized

__all__ = [
    "detect_language",
    "normalize_locale",
    "resolve_locale",
    "PluralClass",
    "plural_class",
    "plural_key",
    "BUILTIN_RESOURCES",
    "ResourceTable",
    "default_table",
    "ensure_initialized",
]
