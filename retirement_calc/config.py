"""TOML config loader with CLI > config > default resolution."""

import argparse
import dataclasses
import re
import sys
import tomllib
from pathlib import Path

from retirement_calc.currency import Currency, parse_currency
from retirement_calc.params import CorpusInputs, SIPInputs

DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_CURRENCY = Currency.INR.value

CORPUS_DEFAULTS = {f.name: f.default for f in dataclasses.fields(CorpusInputs)}
SIP_DEFAULTS = {f.name: f.default for f in dataclasses.fields(SIPInputs)}

# flag help text per field
_HELP = {
    "current_expenses": "Current annual expenses",
    "current_investment": "Current invested corpus",
    "expenses_increment_per_year": "Yearly expense increase (%%)",
    "expected_rate_of_return": "Expected return on the corpus (%%)",
    "current_age": "Current age",
    "retirement_age": "Retirement age (below 90)",
    "annual_expense": "Annual expense at retirement",
    "expected_inflation": "Expected inflation (%%)",
    "expected_return_during_investment": "Expected return while investing (%%)",
    "expected_return_after_retirement": "Expected post-tax return after retirement (%%)",
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(key: str) -> str:
    """currentExpenses → current_expenses; snake_case keys pass through."""
    return _CAMEL.sub("_", key).lower()


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist.

    Layout::

        currency = "INR"
        [corpus]
        current_expenses = 1200000
        [sip]
        retirement_age = 55
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Normalize legacy camelCase keys inside calculator tables
    for section in ("corpus", "sip"):
        if section in raw and isinstance(raw[section], dict):
            raw[section] = {_snake(k): v for k, v in raw[section].items()}
    return raw


def create_parser(description: str, kind: str | None = None) -> argparse.ArgumentParser:
    """Create argparse parser with shared flags plus calculator field flags.

    kind is "corpus", "sip", "all" (both calculators) or None (shared flags only).
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="Config file path (default: config.toml)")
    parser.add_argument(
        "--currency", type=str, default=None, choices=[c.value for c in Currency],
        help=f"Display currency (default: {DEFAULT_CURRENCY})",
    )
    defaults = {
        "corpus": CORPUS_DEFAULTS,
        "sip": SIP_DEFAULTS,
        "all": {**CORPUS_DEFAULTS, **SIP_DEFAULTS},
    }.get(kind, {})
    for key, default in defaults.items():
        flag = "--" + key.replace("_", "-")
        parser.add_argument(
            flag, type=type(default), default=None,
            help=f"{_HELP[key]} (default: {default:g})",
        )
    return parser


def resolve(args: argparse.Namespace, config: dict, defaults: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in defaults.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def resolve_currency(args: argparse.Namespace, config: dict) -> Currency:
    value = args.currency if getattr(args, "currency", None) else config.get("currency", DEFAULT_CURRENCY)
    try:
        return parse_currency(str(value))
    except ValueError as e:
        print(f"Invalid currency in config: {e}", file=sys.stderr)
        raise SystemExit(1)


def parse_args(description: str, kind: str) -> tuple[dict, Currency, argparse.Namespace]:
    """Parse CLI args, load config, and resolve one calculator's raw values.

    Returns (raw_values, currency, args). Values are not validated here.
    """
    parser = create_parser(description, kind)
    args = parser.parse_args()
    config = load_config(args.config)
    defaults = CORPUS_DEFAULTS if kind == "corpus" else SIP_DEFAULTS
    r = resolve(args, config.get(kind, {}), defaults)
    return r, resolve_currency(args, config), args
