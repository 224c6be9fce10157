"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from retirement_calc.charts import plot_corpus, plot_sip
from retirement_calc.config import (
    CORPUS_DEFAULTS,
    SIP_DEFAULTS,
    create_parser,
    load_config,
    resolve,
    resolve_currency,
)
from retirement_calc.params import validate_corpus_inputs, validate_sip_inputs
from retirement_calc.simulation import run_corpus_depletion, run_sip_plan


def _build_parser():
    parser = create_parser("Retirement calculator chart generation", "all")
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="Output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="Output filename suffix (e.g. base → corpus-base.png)",
    )
    parser.add_argument("--no-corpus", action="store_true", help="Skip the corpus drawdown chart")
    parser.add_argument("--no-sip", action="store_true", help="Skip the SIP plan chart")
    parser.add_argument("--no-investment", action="store_true", help="Hide cumulative investment on the SIP chart")
    parser.add_argument("--no-corpus-line", action="store_true", help="Hide the corpus line on the SIP chart")
    parser.add_argument("--no-withdrawals", action="store_true", help="Hide cumulative withdrawals on the SIP chart")
    return parser


def main():
    parser = _build_parser()
    args = parser.parse_args()
    config = load_config(args.config)
    currency = resolve_currency(args, config)
    output_dir = args.output
    failed = False

    if not args.no_corpus:
        print("Corpus drawdown...", file=sys.stderr)
        validated = validate_corpus_inputs(resolve(args, config.get("corpus", {}), CORPUS_DEFAULTS))
        if validated.ok:
            path = plot_corpus(run_corpus_depletion(validated.value), output_dir, currency, name=args.name)
            print(f"  → {path}", file=sys.stderr)
        else:
            failed = True
            for e in validated.errors:
                print(f"  corpus: {e} (skipped)", file=sys.stderr)

    if not args.no_sip:
        print("SIP plan...", file=sys.stderr)
        validated = validate_sip_inputs(resolve(args, config.get("sip", {}), SIP_DEFAULTS))
        if validated.ok:
            path = plot_sip(
                run_sip_plan(validated.value), output_dir, currency, name=args.name,
                show_investment=not args.no_investment,
                show_corpus=not args.no_corpus_line,
                show_withdrawals=not args.no_withdrawals,
            )
            print(f"  → {path}", file=sys.stderr)
        else:
            failed = True
            for e in validated.errors:
                print(f"  sip: {e} (skipped)", file=sys.stderr)

    if failed:
        raise SystemExit(1)
    print("Done", file=sys.stderr)


if __name__ == "__main__":
    main()
