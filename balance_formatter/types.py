"""Shared types for the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BalanceSuffix:
    """Subscript part of a balance with a long run of leading zeros."""

    subscript: str
    value: str


@dataclass(frozen=True)
class FormattedBalance:
    """Result of formatting a balance string for display."""

    prefix: str
    suffix: Optional[BalanceSuffix] = None
    is_rounded: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape consumed by rendering layers."""
        data: Dict[str, Any] = {"prefix": self.prefix}
        if self.suffix is not None:
            data["suffix"] = {
                "subscript": self.suffix.subscript,
                "value": self.suffix.value,
            }
        data["isRounded"] = self.is_rounded
        return data
