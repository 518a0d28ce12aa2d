"""Tests for shared result types."""

from dataclasses import FrozenInstanceError

import pytest
from balance_formatter.types import BalanceSuffix, FormattedBalance


def test_formatted_balance_defaults():
    """Test FormattedBalance dataclass defaults."""
    result = FormattedBalance(prefix="123.45")
    assert result.prefix == "123.45"
    assert result.suffix is None
    assert result.is_rounded is False


def test_to_dict_without_suffix():
    """The suffix key is omitted when there is no subscript part."""
    result = FormattedBalance(prefix="123.456789", is_rounded=True)
    assert result.to_dict() == {"prefix": "123.456789", "isRounded": True}


def test_to_dict_with_suffix():
    result = FormattedBalance(
        prefix="0.0",
        suffix=BalanceSuffix(subscript="4", value="1234"),
    )
    assert result.to_dict() == {
        "prefix": "0.0",
        "suffix": {"subscript": "4", "value": "1234"},
        "isRounded": False,
    }


def test_formatted_balance_is_frozen():
    result = FormattedBalance(prefix="1")
    with pytest.raises(FrozenInstanceError):
        result.prefix = "2"
