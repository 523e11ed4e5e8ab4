"""
Tests for the shop ledger
"""

from core.shop import CATALOG, CATALOG_BY_ID, owns_effect, purchase
from models.shop import PurchaseFailure, ShopItem


ITEM = ShopItem(id="streak_freeze", name="Streak Freeze", description="", cost=500,
                icon="Shield", effect="freeze")


def test_purchase_with_exact_credits():
    result = purchase(500, [], ITEM)

    assert result.ok is True
    assert result.credits == 0
    assert result.inventory == ["streak_freeze"]
    assert result.reason is None


def test_purchase_already_owned():
    first = purchase(500, [], ITEM)
    second = purchase(first.credits, first.inventory, ITEM)

    assert second.ok is False
    assert second.reason == PurchaseFailure.ALREADY_OWNED
    assert second.credits == 0
    assert second.inventory == ["streak_freeze"]


def test_purchase_insufficient_funds():
    result = purchase(499, [], ITEM)

    assert result.ok is False
    assert result.reason == PurchaseFailure.INSUFFICIENT_FUNDS
    assert result.credits == 499
    assert result.inventory == []


def test_owned_item_reported_before_funds():
    result = purchase(0, ["streak_freeze"], ITEM)
    assert result.reason == PurchaseFailure.ALREADY_OWNED


def test_purchase_appends_in_order():
    inventory = ["xp_boost"]
    result = purchase(1000, inventory, ITEM)

    assert result.inventory == ["xp_boost", "streak_freeze"]
    # Caller's list is not modified
    assert inventory == ["xp_boost"]


def test_catalog():
    assert [item.id for item in CATALOG] == ["streak_freeze", "xp_boost", "theme_gold"]
    assert CATALOG_BY_ID["theme_gold"].cost == 5000
    assert CATALOG_BY_ID["xp_boost"].effect == "multiplier"


def test_owns_effect():
    assert owns_effect(["theme_gold"], "theme") is True
    assert owns_effect(["streak_freeze"], "theme") is False
    assert owns_effect(["unknown_item"], "theme") is False
