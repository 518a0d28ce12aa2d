"""Shared formatting helpers for balances and grouped numbers."""

from __future__ import annotations

import logging
import re
from decimal import (
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Optional, Union

from balance_formatter.types import BalanceSuffix, FormattedBalance

logger = logging.getLogger(__name__)

MAX_DECIMALS = 6
SUBSCRIPT_THRESHOLD = 4
SIGNIFICANT_DIGITS = 4

NO_VALUE = "-"
GROUP_SEPARATOR = ","

STRK_DECIMALS = 6
FRI_PER_STRK_EXPONENT = 18

_BALANCE_RE = re.compile(r"([0-9][0-9,]*)?(?:\.([0-9]*))?")
_INTEGER_RE = re.compile(r"[0-9]*")
_SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")

NumberLike = Union[str, int, Decimal]


class InvalidDecimalString(ValueError):
    """Raised when a balance string is not a plain non-negative decimal."""

    def __init__(self, value: str) -> None:
        self.value = value
        shown = value if len(value) <= 40 else value[:40] + "..."
        super().__init__(f"Invalid decimal string: {shown!r}")


def _group_digits(digits: str) -> str:
    digits = digits.lstrip("0") or "0"
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return GROUP_SEPARATOR.join(groups)


def format_number(value: Optional[NumberLike]) -> str:
    """Insert thousands separators into the integer portion of a number.

    Returns ``"-"`` for *None* or an empty string. Existing separators are
    stripped first, so re-formatting an already grouped string is a no-op.
    Any fractional part is kept verbatim. Grouping works on the digit string
    directly, so magnitude is unbounded.
    """
    if value is None or value == "":
        return NO_VALUE
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        text = format(value, "f")
    elif isinstance(value, int):
        text = str(value)
    else:
        text = value.replace(GROUP_SEPARATOR, "")

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    integer, dot, fraction = text.partition(".")
    if (
        not (integer or fraction)
        or not _INTEGER_RE.fullmatch(integer)
        or not _INTEGER_RE.fullmatch(fraction)
    ):
        raise ValueError(f"Not a number: {value!r}")
    return f"{sign}{_group_digits(integer)}{dot}{fraction}"


def format_balance(
    value: str,
    *,
    max_decimals: int = MAX_DECIMALS,
    subscript_threshold: int = SUBSCRIPT_THRESHOLD,
    significant_digits: int = SIGNIFICANT_DIGITS,
) -> FormattedBalance:
    """Format a decimal balance string of any size for compact display.

    Fractions with fewer than ``subscript_threshold`` leading zeros are
    floored to ``max_decimals`` places. Longer zero runs switch to subscript
    notation: the prefix ends in ``.0``, the suffix carries the zero count and
    the first ``significant_digits`` digits after the run, truncated.
    Balances are never rounded up, and the integer part is never touched by
    fractional rounding.

    Args:
        value: Non-negative decimal string, e.g. ``"1,234.000012"``

    Returns:
        FormattedBalance describing how to render the value

    Raises:
        InvalidDecimalString: If *value* is not digits with optional
            integer-part commas and at most one decimal point
    """
    if value == "":
        return FormattedBalance(prefix=format_number(None))

    match = _BALANCE_RE.fullmatch(value)
    if match is None or (match.group(1) is None and not match.group(2)):
        raise InvalidDecimalString(value)

    grouped = format_number(match.group(1) or "0")
    decimal_part = (match.group(2) or "").rstrip("0")
    if not decimal_part:
        return FormattedBalance(prefix=grouped)

    significant = decimal_part.lstrip("0")
    leading_zeros = len(decimal_part) - len(significant)

    if leading_zeros < subscript_threshold:
        exact = Decimal(f"0.{decimal_part}")
        with localcontext() as ctx:
            ctx.prec = max_decimals + 2
            floored = exact.quantize(
                Decimal(1).scaleb(-max_decimals), rounding=ROUND_FLOOR
            )
        digits = format(floored, "f").partition(".")[2].rstrip("0") or "0"
        return FormattedBalance(
            prefix=f"{grouped}.{digits}",
            is_rounded=floored < exact,
        )

    logger.debug("Using subscript notation for %d leading zeros", leading_zeros)
    return FormattedBalance(
        prefix=f"{grouped}.0",
        suffix=BalanceSuffix(
            subscript=str(leading_zeros),
            value=significant[:significant_digits],
        ),
        is_rounded=len(significant) > significant_digits,
    )


def to_subscript(digits: str) -> str:
    """Map ASCII digits to their Unicode subscript glyphs."""
    return digits.translate(_SUBSCRIPT_DIGITS)


def render_balance(balance: FormattedBalance) -> str:
    """Join a formatted balance into a single display string."""
    if balance.suffix is None:
        return balance.prefix
    return (
        f"{balance.prefix}"
        f"{to_subscript(balance.suffix.subscript)}"
        f"{balance.suffix.value}"
    )


def format_starknet_amount(amount: NumberLike, unit: str = "starknet") -> str:
    """Format an amount given in fri as STRK or as grouped fri.

    Ties round toward negative infinity. STRK output always shows six
    decimals.
    """
    if unit not in ("starknet", "fri"):
        raise ValueError(f"Unknown STRK unit: {unit}")

    try:
        amount_dec = Decimal(str(amount).replace(GROUP_SEPARATOR, ""))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {amount!r}") from exc
    if not amount_dec.is_finite():
        raise ValueError(f"Not a number: {amount!r}")

    # half-floor: ties go down for positives, away from zero for negatives
    rounding = ROUND_HALF_DOWN if amount_dec >= 0 else ROUND_HALF_UP

    with localcontext() as ctx:
        ctx.prec = (
            max(ctx.prec, len(amount_dec.as_tuple().digits), amount_dec.adjusted() + 1)
            + STRK_DECIMALS
            + 2
        )
        if unit == "starknet":
            quantized = amount_dec.scaleb(-FRI_PER_STRK_EXPONENT).quantize(
                Decimal(1).scaleb(-STRK_DECIMALS), rounding=rounding
            )
            label = "STRK"
        else:
            quantized = amount_dec.quantize(Decimal(1), rounding=rounding)
            label = "fri"

    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return f"{format_number(quantized)} {label}"


__all__ = [
    "InvalidDecimalString",
    "MAX_DECIMALS",
    "NO_VALUE",
    "SIGNIFICANT_DIGITS",
    "SUBSCRIPT_THRESHOLD",
    "format_balance",
    "format_number",
    "format_starknet_amount",
    "render_balance",
    "to_subscript",
]
