"""
偏好服务测试：翻译、货币格式化、主题持久化
"""

import pytest

from dietitian.core.exceptions import ValidationError
from dietitian.services.preference_service import PreferenceService, ThemeStore, format_price, translate


class TestTranslate:

    def test_known_key(self):
        assert translate("addToCart", "fr") == "Ajouter au panier"

    def test_missing_key_returns_key(self):
        assert translate("regular", "tw") == "regular"
        assert translate("noSuchKey", "en") == "noSuchKey"


class TestFormatPrice:

    def test_cedi_conversion(self):
        assert format_price(10.0, "GHS", exchange_rate=15.0) == "₵ 150.00"

    def test_usd(self):
        assert format_price(15.3, "USD") == "$ 15.30"


class TestThemeStore:

    def test_defaults_to_light(self, theme_store):
        assert theme_store.load() == "light"

    def test_toggle_persists(self, tmp_path, theme_store):
        assert theme_store.toggle() == "dark"
        assert ThemeStore(str(tmp_path / "theme.json")).load() == "dark"
        assert theme_store.toggle() == "light"

    def test_corrupt_file_falls_back(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("not json", encoding="utf-8")
        assert ThemeStore(str(path)).load() == "light"


class TestPreferenceService:

    def test_defaults(self, test_db, demo_user, theme_store):
        prefs = PreferenceService(test_db, theme_store).get(demo_user.id)
        assert prefs.language == "en"
        assert prefs.currency == "GHS"
        assert prefs.theme == "light"

    def test_update_and_partial_update(self, test_db, demo_user, theme_store):
        service = PreferenceService(test_db, theme_store)
        service.update(demo_user.id, language="zh", currency="USD")
        prefs = service.update(demo_user.id, language="tw")
        assert prefs.language == "tw"
        assert prefs.currency == "USD"

    def test_invalid_language(self, test_db, demo_user, theme_store):
        with pytest.raises(ValidationError):
            PreferenceService(test_db, theme_store).update(demo_user.id, language="de")
