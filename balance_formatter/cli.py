"""CLI interface for the balance formatter."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from balance_formatter.cache import TTLCache
from balance_formatter.config import Settings, load_settings
from balance_formatter.formatting import InvalidDecimalString, format_balance
from balance_formatter.output import BalanceRow, CLIOutput, OutputFormat
from balance_formatter.types import FormattedBalance

logger = logging.getLogger(__name__)


def format_one(
    value: str,
    settings: Settings,
    cache: Optional[TTLCache] = None,
) -> FormattedBalance:
    """Format a single value, consulting *cache* first when given."""
    if cache is not None:
        cached = cache.get(value)
        if cached is not None:
            logger.debug("Cache hit for balance input")
            return cached

    balance = format_balance(
        value,
        max_decimals=settings.max_decimals,
        subscript_threshold=settings.subscript_threshold,
        significant_digits=settings.significant_digits,
    )
    if cache is not None:
        cache.set(value, balance)
    return balance


def format_values(
    values: List[str],
    settings: Settings,
    cache: Optional[TTLCache] = None,
) -> Tuple[List[BalanceRow], List[str]]:
    """Format every value, collecting error messages for invalid ones."""
    rows: List[BalanceRow] = []
    errors: List[str] = []
    for value in values:
        try:
            rows.append((value, format_one(value, settings, cache)))
        except InvalidDecimalString as exc:
            errors.append(str(exc))
    return rows, errors


def run_interactive(
    output: CLIOutput,
    settings: Settings,
    cache: TTLCache,
) -> None:
    """Run interactive REPL session."""
    output.info("Balance Formatter - Interactive Mode")
    output.info("Enter balances separated by spaces, or /quit to exit")
    output.info("-" * 50)

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            output.info("\nGoodbye!")
            break

        if not line:
            continue

        if line.startswith("/"):
            cmd = line.lower()
            if cmd in ("/quit", "/exit", "/q"):
                output.info("Goodbye!")
                break
            elif cmd in ("/clear", "/reset"):
                removed = cache.clear()
                output.info(f"Cache cleared ({removed} entries).")
            elif cmd == "/stats":
                cache.cleanup_expired()
                stats = cache.stats
                output.info(
                    f"Cache: {stats['size']} entries, {stats['hits']} hits, "
                    f"{stats['misses']} misses ({stats['hit_rate']}% hit rate)"
                )
            elif cmd in ("/help", "/h"):
                output.info("Commands: /quit, /clear, /stats, /help")
            else:
                output.warning(f"Unknown command: {line}")
            continue

        rows, errors = format_values(line.split(), settings, cache)
        for message in errors:
            output.error(message)
        if rows:
            output.balances(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="balance-fmt",
        description="Balance Formatter - Render decimal balances for display",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  balance-fmt 1234.4567891 0.00001234
  balance-fmt --output json 0.000000000000006789
  echo "300,000 0.5" | balance-fmt --stdin --output text
  balance-fmt --interactive
        """,
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Decimal balances (e.g., '1,234.5678')",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    parser.add_argument(
        "-o", "--output",
        choices=["text", "json", "table"],
        default=None,
        help="Output format (default: BALANCE_OUTPUT or table)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug information",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read whitespace-separated values from stdin",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interactive and (args.values or args.stdin):
        parser.error("--interactive cannot be combined with values or --stdin")

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"❌ Failed to load settings: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output_format = OutputFormat(args.output or settings.output_format)
    output = CLIOutput(format=output_format, verbose=args.verbose)

    if not args.interactive and not args.values and not args.stdin:
        parser.print_help()
        sys.exit(1)

    values: List[str] = list(args.values)
    if args.stdin:
        values.extend(sys.stdin.read().split())
        if not values:
            output.error("No values provided via stdin")
            sys.exit(1)

    if args.interactive:
        cache = TTLCache(ttl_seconds=settings.cache_ttl_seconds)
        run_interactive(output, settings, cache)
        return

    output.debug(f"Formatting {len(values)} value(s)")
    rows, errors = format_values(values, settings)
    for message in errors:
        output.error(message)
    if rows:
        output.balances(rows)
    if errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
