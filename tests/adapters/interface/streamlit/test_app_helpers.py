"""Tests for the Streamlit app input helpers."""

from decimal import Decimal

import pytest

from src.adapters.interface.streamlit import app


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12.50", Decimal("12.50")),
        (" $1,200 ", Decimal("1200")),
        ("0", Decimal("0")),
    ],
)
def test_parse_amount_accepts_valid_input(raw, expected) -> None:
    assert app.parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "-5", "NaN", "Infinity"])
def test_parse_amount_rejects_invalid_input(raw) -> None:
    assert app.parse_amount(raw) is None


def test_every_page_is_listed() -> None:
    assert app.PAGES[0] == "Insights"
    assert "AI Settings" in app.PAGES
