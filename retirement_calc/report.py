"""Plain-text tables for calculator results."""

from retirement_calc.currency import Currency, format_currency
from retirement_calc.params import MAX_YEARS, MONTHS_PER_YEAR, SIPInputs
from retirement_calc.simulation import (
    CorpusYearRecord,
    Phase,
    SIPPlanResult,
    summarize_corpus,
    summarize_sip,
)

RULE_WIDTH = 100


def _row(cells: list[str], widths: list[int]) -> str:
    # first column left-aligned, the rest right-aligned
    parts = [f"{cells[0]:<{widths[0]}}"]
    parts += [f"{c:>{w}}" for c, w in zip(cells[1:], widths[1:])]
    return " ".join(parts).rstrip()


def render_corpus_table(records: tuple[CorpusYearRecord, ...], currency: Currency = Currency.INR) -> str:
    def fmt(v: float) -> str:
        return format_currency(v, currency)

    summary = summarize_corpus(records)
    widths = [6, 22, 20, 20, 22]
    lines = [
        "=" * RULE_WIDTH,
        "Corpus Drawdown",
        "=" * RULE_WIDTH,
        f"  Years lasted:    {summary.years_lasted}",
        f"  Total withdrawn: {fmt(summary.total_withdrawn)}",
        f"  Total interest:  {fmt(summary.total_interest)}",
        f"  Final balance:   {fmt(summary.final_balance)}",
    ]
    if summary.capped:
        lines.append(f"  Balance never depletes within {MAX_YEARS} years")
    lines += [
        "-" * RULE_WIDTH,
        _row(["Year", "Start Balance", "Withdrawal", "Interest Earned", "End Balance"], widths),
        "-" * RULE_WIDTH,
    ]
    for r in records:
        lines.append(_row(
            [str(r.year), fmt(r.start_balance), fmt(r.withdrawal), fmt(r.interest_earned), fmt(r.end_balance)],
            widths,
        ))
    lines.append("-" * RULE_WIDTH)
    return "\n".join(lines)


def render_sip_table(result: SIPPlanResult, inputs: SIPInputs, currency: Currency = Currency.INR) -> str:
    def fmt(v: float) -> str:
        return format_currency(v, currency)

    summary = summarize_sip(result, inputs)
    widths = [6, 5, 14, 24, 20, 22]
    lines = [
        "=" * RULE_WIDTH,
        "SIP Results",
        "=" * RULE_WIDTH,
        f"  Required Corpus:     {fmt(summary.required_corpus)}",
        f"  Monthly SIP Needed:  {fmt(summary.monthly_sip)}",
        f"  Years to Retirement: {summary.years_to_retirement}",
        f"  Retirement Duration: {summary.retirement_duration}",
    ]
    if summary.depletion_age is not None:
        lines.append(f"  Corpus depleted at age {summary.depletion_age}")
    lines += [
        "-" * RULE_WIDTH,
        _row(["Year", "Age", "Phase", "Investment/Withdrawal", "Interest Earned", "End Corpus"], widths),
        "-" * RULE_WIDTH,
    ]
    for r in result.year_records:
        if r.phase is Phase.ACCUMULATION:
            flow = fmt(r.monthly_investment * MONTHS_PER_YEAR)
        else:
            flow = f"-{fmt(r.withdrawal)}"
        lines.append(_row(
            [str(r.year), str(r.age), r.phase.value.capitalize(), flow, fmt(r.interest_earned), fmt(r.end_corpus)],
            widths,
        ))
    lines.append("-" * RULE_WIDTH)
    lines.append("Accumulation (saving) and withdrawal (retirement) phases until age 90 or corpus depletion")
    return "\n".join(lines)
