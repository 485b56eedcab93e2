# Translation resources for duration units
import logging
from typing import Dict, List, Optional

from timediff.errors import MissingResourceError

logger = logging.getLogger(__name__)

BUILTIN_RESOURCES: Dict[str, Dict[str, str]] = {
    'en': {
        'days': "{count} day",
        'days_plural': "{count} days",
        'hours': "{count} hour",
        'hours_plural': "{count} hours",
        'minutes': "{count} minute",
        'minutes_plural': "{count} minutes",
        'seconds': "{count} second",
        'seconds_plural': "{count} seconds",
    },
    'ru': {
        'days': "{count} день",
        'days_plural': "{count} дня",
        'days_plural_2': "{count} дней",
        'hours': "{count} час",
        'hours_plural': "{count} часа",
        'hours_plural_2': "{count} часов",
        'minutes': "{count} минута",
        'minutes_plural': "{count} минуты",
        'minutes_plural_2': "{count} минут",
        'seconds': "{count} секунда",
        'seconds_plural': "{count} секунды",
        'seconds_plural_2': "{count} секунд",
    },
}


class ResourceTable:
    """
    Read-only lookup of translation templates keyed by locale and key

    Templates carry a {count} placeholder. Lookups never switch a shared
    active language, so one table can serve any number of callers.
    """

    def __init__(self, resources: Optional[Dict[str, Dict[str, str]]] = None):
        self._resources: Dict[str, Dict[str, str]] = {}
        if resources is not None:
            self.init(resources)

    @property
    def is_initialized(self) -> bool:
        """True once a hosting application or ensure_initialized() loaded resources"""
        return bool(self._resources)

    def init(self, resources: Dict[str, Dict[str, str]]) -> None:
        """Replace all resources"""
        self._resources = {locale: dict(entries) for locale, entries in resources.items()}
        logger.debug(f"Resource table initialized with locales: {', '.join(sorted(self._resources))}")

    def add_resources(self, locale: str, entries: Dict[str, str]) -> None:
        """Merge entries into a locale, creating it if needed"""
        self._resources.setdefault(locale, {}).update(entries)

    def locales(self) -> List[str]:
        return sorted(self._resources)

    def has(self, locale: str, key: str) -> bool:
        return key in self._resources.get(locale, {})

    def translate(self, locale: str, key: str, count: int) -> str:
        """
        Render the template for (locale, key) with count substituted

        Raises:
            MissingResourceError: if the locale or key is not loaded
        """
        entries = self._resources.get(locale)
        if entries is None:
            raise MissingResourceError(f"No resources for locale {locale!r}")
        template = entries.get(key)
        if template is None:
            raise MissingResourceError(f"No resource {key!r} for locale {locale!r}")
        return template.format(count=count)


def ensure_initialized(table: ResourceTable) -> ResourceTable:
    """Load the built-in en/ru resources unless the table was already initialized"""
    if not table.is_initialized:
        logger.debug("Resource table not initialized, loading built-in resources")
        table.init(BUILTIN_RESOURCES)
    return table


default_table = ResourceTable()
