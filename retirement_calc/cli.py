"""CLI entry points for the corpus and SIP calculators."""

import sys

from retirement_calc.config import parse_args
from retirement_calc.params import validate_corpus_inputs, validate_sip_inputs
from retirement_calc.report import render_corpus_table, render_sip_table
from retirement_calc.simulation import run_corpus_depletion, run_sip_plan


def _fail(errors: list[str]):
    for e in errors:
        print(f"Error: {e}", file=sys.stderr)
    raise SystemExit(1)


def corpus_main():
    """How long does the current corpus last?"""
    r, currency, _ = parse_args("Retirement corpus drawdown calculator", "corpus")
    validated = validate_corpus_inputs(r)
    if not validated.ok:
        _fail(validated.errors)
    records = run_corpus_depletion(validated.value)
    print(render_corpus_table(records, currency))


def sip_main():
    """Monthly SIP needed to retire at the given age."""
    r, currency, _ = parse_args("Retirement SIP planner", "sip")
    validated = validate_sip_inputs(r)
    if not validated.ok:
        _fail(validated.errors)
    result = run_sip_plan(validated.value)
    print(render_sip_table(result, validated.value, currency))


if __name__ == "__main__":
    corpus_main()
