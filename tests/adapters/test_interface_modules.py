"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "module_name",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(module_name: str) -> None:
    module = import_module(module_name)
    assert module.__all__ == []
