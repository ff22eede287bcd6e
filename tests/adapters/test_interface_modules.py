"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(package: str) -> None:
    module = import_module(package)
    assert module.__all__ == []


def test_charts_module_exports_builders() -> None:
    module = import_module("src.adapters.interface.streamlit.charts")
    assert {"build_category_chart", "build_trend_chart"} <= set(module.__all__)
