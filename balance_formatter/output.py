"""CLI output formatting with table support."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from balance_formatter.formatting import render_balance
from balance_formatter.types import FormattedBalance

BalanceRow = Tuple[str, FormattedBalance]


class OutputFormat(Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class CLIOutput:
    """Unified output handler for CLI."""

    def __init__(
        self,
        format: OutputFormat = OutputFormat.TABLE,
        verbose: bool = False,
        stream: Any = None,
    ) -> None:
        self.format = format
        self.verbose = verbose
        self.stream = stream or sys.stdout
        self._console: Optional[Console] = None

        if format == OutputFormat.TABLE:
            self._console = Console(file=self.stream)

    def balances(self, rows: List[BalanceRow]) -> None:
        """Output formatted balances."""
        if self.format == OutputFormat.JSON:
            self._json_balances(rows)
        elif self.format == OutputFormat.TABLE:
            self._table_balances(rows)
        else:
            self._text_balances(rows)

    def _text_balances(self, rows: List[BalanceRow]) -> None:
        """Plain text output, one balance per line."""
        for raw, balance in rows:
            marker = " (rounded)" if balance.is_rounded else ""
            print(f"{raw} -> {render_balance(balance)}{marker}", file=self.stream)

    def _json_balances(self, rows: List[BalanceRow]) -> None:
        """JSON output for scripting."""
        output = [
            {"input": raw, "display": render_balance(balance), **balance.to_dict()}
            for raw, balance in rows
        ]
        print(json.dumps(output, indent=2, ensure_ascii=False), file=self.stream)

    def _table_balances(self, rows: List[BalanceRow]) -> None:
        """Rich terminal output with a table."""
        table = Table(show_header=True, header_style="bold cyan", expand=False)
        table.add_column("Input", style="dim", overflow="fold")
        table.add_column("Display", style="green")
        table.add_column("Zeros", justify="right", style="magenta")
        table.add_column("Rounded", justify="center")

        for raw, balance in rows:
            table.add_row(
                self._shorten(raw),
                render_balance(balance),
                balance.suffix.subscript if balance.suffix else "",
                "yes" if balance.is_rounded else "no",
            )

        self._console.print(table)

    @staticmethod
    def _shorten(value: str, limit: int = 32) -> str:
        """Abbreviate very long inputs for table cells."""
        if len(value) <= limit:
            return value
        return f"{value[:limit // 2]}…{value[-(limit // 2):]} ({len(value)} chars)"

    def info(self, message: str) -> None:
        """Output an info message."""
        if self.format == OutputFormat.JSON:
            return
        if self._console:
            self._console.print(f"[blue]ℹ️  {message}[/blue]")
        else:
            print(f"ℹ️  {message}", file=self.stream)

    def debug(self, message: str) -> None:
        """Output a debug message (only in verbose mode)."""
        if not self.verbose:
            return
        if self.format == OutputFormat.JSON:
            print(json.dumps({"debug": message}), file=sys.stderr)
            return
        if self._console:
            self._console.print(f"[dim]🔍 {message}[/dim]")
        else:
            print(f"🔍 {message}", file=sys.stderr)

    def warning(self, message: str) -> None:
        """Output a warning message."""
        if self.format == OutputFormat.JSON:
            print(json.dumps({"warning": message}), file=sys.stderr)
            return
        if self._console:
            self._console.print(f"[yellow]⚠️  {message}[/yellow]")
        else:
            print(f"⚠️  {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        """Output an error message."""
        if self.format == OutputFormat.JSON:
            print(json.dumps({"error": message}), file=sys.stderr)
            return
        print(f"❌ {message}", file=sys.stderr)
