from enum import Enum


class PluralClass(str, Enum):
    """Grammatical number category selected from a unit's value"""
    ONE = "one"    # 1 день, 21 день
    FEW = "few"    # 2 дня, 23 часа
    MANY = "many"  # 5 дней, 11 минут, 0 секунд


# Resource key suffix per plural class, per locale
KEY_SUFFIXES = {
    'en': {PluralClass.ONE: '', PluralClass.MANY: '_plural'},
    'ru': {PluralClass.ONE: '', PluralClass.FEW: '_plural', PluralClass.MANY: '_plural_2'},
}


def _russian_plural_class(count: int) -> PluralClass:
    """Russian pluralization: один / два-четыре / пять and teens"""
    last_digit = count % 10
    last_two_digits = count % 100
    if last_digit == 1 and last_two_digits != 11:
        return PluralClass.ONE
    elif 2 <= last_digit <= 4 and not 10 <= last_two_digits <= 19:
        return PluralClass.FEW
    else:
        return PluralClass.MANY


def plural_class(locale: str, count: int) -> PluralClass:
    """Select the plural class for count; locales other than ru use English rules"""
    if locale == 'ru':
        return _russian_plural_class(count)
    return PluralClass.ONE if count == 1 else PluralClass.MANY


def plural_key(locale: str, unit: str, count: int) -> str:
    """Resource key for unit rendered with count, e.g. ('ru', 'days', 5) -> 'days_plural_2'"""
    suffixes = KEY_SUFFIXES.get(locale, KEY_SUFFIXES['en'])
    return unit + suffixes[plural_class(locale, count)]
