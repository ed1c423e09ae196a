"""
计价规则测试
"""

import pytest

from dietitian.core.exceptions import ValidationError
from dietitian.models.cart import MealCustomization
from dietitian.models.meal import AddOn
from dietitian.services.pricing import calculate_unit_price, cart_line_id, quote, resolve_add_ons


class TestUnitPrice:
    """单价计算"""

    def test_large_weekly_with_add_on(self):
        """$10 大份 + $2 加料 + 每周订购 = $15.30"""
        price = calculate_unit_price(10.0, "Large", [AddOn(name="Sauce", price=2.0)], "Weekly")
        assert price == pytest.approx(15.30)

    def test_standard_one_time_is_base_price(self):
        assert calculate_unit_price(12.0, "Standard", [], "One-time") == pytest.approx(12.0)

    def test_monthly_discount_applies_to_add_ons(self):
        price = calculate_unit_price(9.0, "Standard", [AddOn(name="Boiled Egg", price=1.0)], "Monthly")
        assert price == pytest.approx(9.0)

    def test_large_one_time_no_discount(self):
        price = calculate_unit_price(12.0, "Large", [AddOn(name="Avocado", price=1.5)], "One-time")
        assert price == pytest.approx(19.5)


class TestQuote:
    """定制报价"""

    def test_quote_resolves_add_ons_by_name(self, jollof):
        customization, price = quote(jollof, "Large", ["Extra Chicken"], "Weekly")
        assert [a.name for a in customization.selected_add_ons] == ["Extra Chicken"]
        assert price == pytest.approx((12.0 * 1.5 + 3.0) * 0.9)

    def test_unknown_add_on_rejected(self, jollof):
        with pytest.raises(ValidationError):
            resolve_add_ons(jollof, ["Shito Sauce"])

    def test_line_id_differs_by_customization(self):
        standard = MealCustomization(portion="Standard")
        large = MealCustomization(portion="Large")
        assert cart_line_id(1, standard) != cart_line_id(1, large)
        assert cart_line_id(1, standard) == cart_line_id(1, MealCustomization())
        assert cart_line_id(1, standard).startswith("1-")
