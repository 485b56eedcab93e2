"""Tests for plural rules, resources and language detection"""
import pytest
from unittest.mock import patch

from timediff.errors import MissingResourceError
from timediff.i18n import (
    BUILTIN_RESOURCES,
    PluralClass,
    ResourceTable,
    detect_language,
    ensure_initialized,
    normalize_locale,
    plural_class,
    plural_key,
    resolve_locale,
)


class TestPluralRules:
    """Test plural class selection"""

    @pytest.mark.parametrize("count,expected", [
        (0, PluralClass.MANY),
        (1, PluralClass.ONE),
        (2, PluralClass.FEW),
        (4, PluralClass.FEW),
        (5, PluralClass.MANY),
        (11, PluralClass.MANY),
        (12, PluralClass.MANY),
        (19, PluralClass.MANY),
        (21, PluralClass.ONE),
        (23, PluralClass.FEW),
        (111, PluralClass.MANY),
        (1001, PluralClass.ONE),
    ])
    def test_russian(self, count, expected):
        """Test the three-way Russian rule"""
        assert plural_class('ru', count) == expected

    def test_english(self):
        """Test English only singles out 1"""
        assert plural_class('en', 1) == PluralClass.ONE
        assert plural_class('en', 0) == PluralClass.MANY
        assert plural_class('en', 21) == PluralClass.MANY

    def test_plural_keys(self):
        """Test resource keys per locale and class"""
        assert plural_key('ru', 'days', 1) == 'days'
        assert plural_key('ru', 'days', 3) == 'days_plural'
        assert plural_key('ru', 'days', 5) == 'days_plural_2'
        assert plural_key('en', 'hours', 1) == 'hours'
        assert plural_key('en', 'hours', 2) == 'hours_plural'

    def test_russian_day_forms(self, table):
        """Test rendered Russian day forms"""
        forms = {0: "дней", 1: "день", 2: "дня", 5: "дней", 11: "дней", 21: "день", 23: "дня"}
        for count, word in forms.items():
            assert table.translate('ru', plural_key('ru', 'days', count), count) == f"{count} {word}"


class TestResourceTable:
    """Test the resource table"""

    def test_not_initialized_by_default(self):
        """Test a new table is empty"""
        assert not ResourceTable().is_initialized

    def test_ensure_initialized_loads_builtins(self):
        """Test built-in resources are loaded into an empty table"""
        table = ensure_initialized(ResourceTable())
        assert table.locales() == ['en', 'ru']
        assert table.translate('en', 'days', 1) == "1 day"

    def test_ensure_initialized_keeps_host_resources(self):
        """Test an initialized table is left alone"""
        table = ResourceTable({'en': {'days': "{count} jour"}})
        ensure_initialized(table)
        assert table.locales() == ['en']
        assert table.translate('en', 'days', 1) == "1 jour"

    def test_init_copies_resources(self):
        """Test the table does not share the caller's dictionaries"""
        table = ResourceTable(BUILTIN_RESOURCES)
        table.add_resources('en', {'days': "{count} d."})
        assert BUILTIN_RESOURCES['en']['days'] == "{count} day"

    def test_has(self, table):
        """Test key lookup"""
        assert table.has('ru', 'seconds_plural_2')
        assert not table.has('en', 'seconds_plural_2')
        assert not table.has('de', 'seconds')

    def test_missing_locale(self, table):
        """Test unknown locale raises"""
        with pytest.raises(MissingResourceError, match="locale 'de'"):
            table.translate('de', 'days', 1)

    def test_missing_key(self, table):
        """Test unknown key raises and is a KeyError"""
        with pytest.raises(KeyError):
            table.translate('en', 'weeks', 1)


class TestLanguageDetection:
    """Test locale detection and resolution"""

    def test_detect_russian(self):
        """Test Russian hints"""
        assert detect_language('ru') == 'ru'
        assert detect_language('ru-RU') == 'ru'
        assert detect_language('ru_RU.UTF-8') == 'ru'

    def test_detect_default_english(self):
        """Test any other hint falls back to English"""
        assert detect_language('en-US') == 'en'
        assert detect_language('uk-UA') == 'en'
        assert detect_language('') == 'en'

    def test_detect_from_config(self):
        """Test the configured hint is used by default"""
        with patch('timediff.i18n.detection.LOCALE_HINT', 'ru_RU.UTF-8'):
            assert detect_language() == 'ru'
        with patch('timediff.i18n.detection.LOCALE_HINT', ''):
            assert detect_language() == 'en'

    def test_normalize_locale(self):
        """Test locale tags reduce to the language"""
        assert normalize_locale('ru-RU') == 'ru'
        assert normalize_locale('EN_us.UTF-8') == 'en'
        assert normalize_locale('ru') == 'ru'

    def test_resolve_locale(self):
        """Test explicit locales win over detection"""
        with patch('timediff.i18n.detection.LOCALE_HINT', 'ru-RU'):
            assert resolve_locale('en') == 'en'
            assert resolve_locale('') == 'ru'
