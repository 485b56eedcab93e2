import logging
from typing import Optional

from timediff.config import LOCALE_HINT

logger = logging.getLogger(__name__)


def normalize_locale(locale: str) -> str:
    """Reduce a locale tag to its lower-cased primary language ('ru-RU' -> 'ru')"""
    return locale.replace('-', '_').split('_')[0].split('.')[0].lower()


def detect_language(hint: Optional[str] = None) -> str:
    """
    Pick 'ru' or 'en' from a client-provided locale string

    Args:
        hint: Locale string such as "ru-RU" or "en_US.UTF-8"; defaults to
            the configured TIMEDIFF_LOCALE / LANG value

    Returns:
        'ru' when the hint starts with "ru", otherwise 'en'
    """
    if hint is None:
        hint = LOCALE_HINT
    language = 'ru' if (hint or '').lower().startswith('ru') else 'en'
    logger.debug(f"Detected language {language!r} from hint {hint!r}")
    return language


def resolve_locale(locale: str = '') -> str:
    """Explicit locale if given, otherwise the detected one"""
    if locale:
        return normalize_locale(locale)
    return detect_language()
