"""Tests for unit, quantity and name normalization."""

import pytest

from pantry.receipts.normalize import clean_name, normalize_unit, sanitize_quantity

_UNIT_SAMPLES = [
    None, "", "  ", "lb", "LBS", "pc", "PCS", "ea", "unit", "Units",
    "pkt", "PKG", "pack", "bag", "KG", "g", "mg", "oz", "L", "ml", "cl", "ct",
    "dozen",
]


class TestNormalizeUnit:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, "pcs"),
            ("", "pcs"),
            ("LBS", "lb"),
            ("lb", "lb"),
            ("EA", "pcs"),
            ("pc", "pcs"),
            ("Units", "pcs"),
            ("unit", "pcs"),
            ("PKG", "pack"),
            ("pkt", "pack"),
            ("bag", "pack"),
            ("KG", "kg"),
            ("ml", "ml"),
            ("ct", "ct"),
            ("  Oz ", "oz"),
            ("dozen", "dozen"),
        ],
    )
    def test_folding(self, raw, expected):
        assert normalize_unit(raw) == expected

    def test_default_argument(self):
        assert normalize_unit() == "pcs"

    @pytest.mark.parametrize("raw", _UNIT_SAMPLES)
    def test_idempotent(self, raw):
        once = normalize_unit(raw)
        assert normalize_unit(once) == once


class TestSanitizeQuantity:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, "1"),
            ("", "1"),
            ("   ", "1"),
            ("2", "2"),
            (" 3 ", "3"),
            ("1,5", "1.5"),
            ("0.75", "0.75"),
            ("1.000,5", "1.000,5"),
            ("1,000,000", "1,000,000"),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_quantity(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "2", "1,5", "1.000,5", "1,000,000", "abc", " 4 "]
    )
    def test_idempotent(self, raw):
        once = sanitize_quantity(raw)
        assert sanitize_quantity(once) == once


class TestCleanName:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("- Organic Milk", "Organic Milk"),
            ("1. Bread", "Bread"),
            ("2) Butter", "Butter"),
            ("• Eggs", "Eggs"),
            ("Qty Butter", "Butter"),
            ("Bananas ea", "Bananas"),
            ("  Greek   Yogurt  ", "Greek Yogurt"),
            ("3 Apples", "Apples"),
            ("Milk:", "Milk"),
            ("- 1. Rice", "Rice"),
            ("7UP", "7UP"),
            ("Tea", "Tea"),
        ],
    )
    def test_clean(self, raw, expected):
        assert clean_name(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "--", "12", "qty", "1.", "12/03/2024 14:32", "$ 4.99 %"]
    )
    def test_nothing_left(self, raw):
        assert clean_name(raw) == ""
