"""Run the examples of every docstring in the package."""

import doctest
import importlib
import pkgutil

import pytest

import adaptchain

MODULES = sorted(
    info.name for info in pkgutil.walk_packages(adaptchain.__path__, prefix="adaptchain.")
)


@pytest.mark.parametrize("name", MODULES)
def test_docstring_examples(name: str) -> None:
    """Test the docstring examples of a module."""
    module = importlib.import_module(name)
    result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert result.failed == 0
