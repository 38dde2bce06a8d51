"""Tests for pathhelper.__init__: lazy import registry covers all public names."""

import pytest

import pathhelper


@pytest.mark.parametrize("name", pathhelper.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(pathhelper, name)
    assert obj is not None, f"pathhelper.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        pathhelper.__getattr__("ThisDoesNotExist")


def test_errors_share_base() -> None:
    for name in ("ConfigurationError", "DuplicateKeyError", "InvalidEntryError"):
        assert issubclass(getattr(pathhelper, name), pathhelper.PathHelperError)
