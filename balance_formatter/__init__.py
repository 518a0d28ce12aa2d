"""Compact display formatting for arbitrary-precision balances."""

from balance_formatter.formatting import (
    InvalidDecimalString,
    format_balance,
    format_number,
    format_starknet_amount,
    render_balance,
    to_subscript,
)
from balance_formatter.types import BalanceSuffix, FormattedBalance

__all__ = [
    "BalanceSuffix",
    "FormattedBalance",
    "InvalidDecimalString",
    "format_balance",
    "format_number",
    "format_starknet_amount",
    "render_balance",
    "to_subscript",
]
