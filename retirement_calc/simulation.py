"""Core simulation engine: corpus drawdown and SIP planning."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from retirement_calc.params import (
    MAX_YEARS,
    MONTHS_PER_YEAR,
    TARGET_AGE,
    CorpusInputs,
    SIPInputs,
)


class Phase(str, Enum):
    ACCUMULATION = "accumulation"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class CorpusYearRecord:
    year: int
    start_balance: float
    withdrawal: float
    interest_earned: float
    end_balance: float


@dataclass(frozen=True)
class SIPYearRecord:
    year: int
    age: int
    monthly_investment: float
    withdrawal: float
    interest_earned: float
    end_corpus: float
    phase: Phase


@dataclass(frozen=True)
class SIPPlanResult:
    required_corpus: float
    monthly_sip: float
    year_records: tuple[SIPYearRecord, ...]

    @property
    def accumulation_records(self) -> tuple[SIPYearRecord, ...]:
        return tuple(r for r in self.year_records if r.phase is Phase.ACCUMULATION)

    @property
    def withdrawal_records(self) -> tuple[SIPYearRecord, ...]:
        return tuple(r for r in self.year_records if r.phase is Phase.WITHDRAWAL)

    @property
    def corpus_at_retirement(self) -> float:
        """Corpus after the last contribution year (0 when nothing was accumulated)."""
        acc = self.accumulation_records
        return acc[-1].end_corpus if acc else 0.0


def _withdraw_year(balance: float, expense: float, rate: float) -> tuple[float, float, float]:
    """One drawdown year: withdraw first, then earn interest on what remains.

    rate is a fraction (0.08 = 8%). Returns (withdrawal, interest, new_balance);
    new_balance is not clamped.
    """
    withdrawal = min(expense, balance)
    balance -= withdrawal
    interest = balance * rate
    return withdrawal, interest, balance + interest


def _drawdown(
    balance: float,
    expense: float,
    rate: float,
    growth: float,
    start_year: int,
    keep_going: Callable[[int, float], bool],
):
    """Yield (year, start_balance, withdrawal, interest, end_balance) until keep_going fails.

    keep_going(next_year, balance) is checked after each emitted year; the first
    year is always emitted. end_balance is clamped at zero.
    """
    year = start_year
    while True:
        start_balance = balance
        withdrawal, interest, balance = _withdraw_year(balance, expense, rate)
        yield year, start_balance, withdrawal, interest, max(0.0, balance)
        expense *= 1 + growth
        year += 1
        if not keep_going(year, balance):
            return


def run_corpus_depletion(inputs: CorpusInputs) -> tuple[CorpusYearRecord, ...]:
    """Simulate a fund drawn down by an inflating expense until it runs out.

    Stops at the year whose end balance reaches zero, or after MAX_YEARS years
    when the balance never depletes.
    """
    rate = inputs.expected_rate_of_return / 100
    growth = inputs.expenses_increment_per_year / 100
    steps = _drawdown(
        inputs.current_investment,
        inputs.current_expenses,
        rate,
        growth,
        start_year=1,
        keep_going=lambda year, balance: balance > 0 and year <= MAX_YEARS,
    )
    return tuple(
        CorpusYearRecord(
            year=year,
            start_balance=start,
            withdrawal=withdrawal,
            interest_earned=interest,
            end_balance=end,
        )
        for year, start, withdrawal, interest, end in steps
    )


def required_corpus(
    retirement_age: int,
    return_after_retirement: float,
    inflation: float,
    annual_expense: float,
) -> float:
    """Corpus needed at retirement to fund inflating expenses until TARGET_AGE.

    Sums each year's expense discounted by (1 + r)^(year + 1), so the first
    withdrawal is discounted one full year. Rates are percent.
    """
    r = return_after_retirement / 100
    g = inflation / 100
    corpus = 0.0
    expense = annual_expense
    for year in range(TARGET_AGE - retirement_age):
        corpus += expense / (1 + r) ** (year + 1)
        expense *= 1 + g
    return corpus


def monthly_rate(annual_percent: float) -> float:
    """Annual percent return → simple monthly rate (12% → 0.01)."""
    return annual_percent / 100 / MONTHS_PER_YEAR


def _calc_sip_payment(target: float, rate: float, months: int) -> float:
    """Level monthly contribution whose annuity-due future value equals target."""
    if rate == 0:
        return target / months
    r = rate
    n = months
    return target * r / (((1 + r) ** n - 1) * (1 + r))


def required_monthly_sip(
    corpus: float,
    years_to_retirement: int,
    return_during_investment: float,
) -> float:
    """Monthly SIP reaching corpus at retirement (contributions at the start of each month)."""
    return _calc_sip_payment(
        corpus,
        monthly_rate(return_during_investment),
        years_to_retirement * MONTHS_PER_YEAR,
    )


def _accumulate(
    monthly_sip: float, rate: float, years: int, start_age: int,
) -> tuple[list[SIPYearRecord], float]:
    """Contribution years: each month add the SIP, then compound."""
    records: list[SIPYearRecord] = []
    corpus = 0.0
    yearly_investment = monthly_sip * MONTHS_PER_YEAR
    for i in range(years):
        start_corpus = corpus
        for _ in range(MONTHS_PER_YEAR):
            corpus += monthly_sip
            corpus *= 1 + rate
        records.append(SIPYearRecord(
            year=i + 1,
            age=start_age + i,
            monthly_investment=monthly_sip,
            withdrawal=0.0,
            interest_earned=corpus - start_corpus - yearly_investment,
            end_corpus=corpus,
            phase=Phase.ACCUMULATION,
        ))
    return records, corpus


def _withdraw_until_target_age(corpus: float, inputs: SIPInputs, first_year: int) -> list[SIPYearRecord]:
    """Retirement years from retirement_age: drawdown that also stops at TARGET_AGE.

    first_year continues the accumulation year counter; the counter never
    exceeds MAX_YEARS.
    """
    age_offset = inputs.retirement_age - first_year

    def keep_going(year: int, balance: float) -> bool:
        return balance > 0 and year + age_offset < TARGET_AGE and year <= MAX_YEARS

    if corpus <= 0 or inputs.retirement_age >= TARGET_AGE or first_year > MAX_YEARS:
        return []
    steps = _drawdown(
        corpus,
        inputs.annual_expense,
        inputs.expected_return_after_retirement / 100,
        inputs.expected_inflation / 100,
        start_year=first_year,
        keep_going=keep_going,
    )
    return [
        SIPYearRecord(
            year=year,
            age=year + age_offset,
            monthly_investment=0.0,
            withdrawal=withdrawal,
            interest_earned=interest,
            end_corpus=end,
            phase=Phase.WITHDRAWAL,
        )
        for year, _start, withdrawal, interest, end in steps
    ]


def run_sip_plan(inputs: SIPInputs) -> SIPPlanResult:
    """Required corpus, monthly SIP and the year-by-year plan through TARGET_AGE.

    The withdrawal phase uses the corpus drawdown step but stops at
    age TARGET_AGE as well as on depletion; the year counter across both
    phases never exceeds MAX_YEARS.
    """
    corpus_needed = required_corpus(
        inputs.retirement_age,
        inputs.expected_return_after_retirement,
        inputs.expected_inflation,
        inputs.annual_expense,
    )
    sip = required_monthly_sip(
        corpus_needed,
        inputs.years_to_retirement,
        inputs.expected_return_during_investment,
    )
    records, corpus = _accumulate(
        sip,
        monthly_rate(inputs.expected_return_during_investment),
        inputs.years_to_retirement,
        inputs.current_age,
    )

    records += _withdraw_until_target_age(corpus, inputs, first_year=len(records) + 1)

    return SIPPlanResult(
        required_corpus=corpus_needed,
        monthly_sip=sip,
        year_records=tuple(records),
    )


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CorpusSummary:
    years_lasted: int
    total_withdrawn: float
    total_interest: float
    final_balance: float
    depleted: bool
    capped: bool


def summarize_corpus(records: tuple[CorpusYearRecord, ...]) -> CorpusSummary:
    final = records[-1].end_balance if records else 0.0
    depleted = final == 0
    return CorpusSummary(
        years_lasted=len(records),
        total_withdrawn=sum(r.withdrawal for r in records),
        total_interest=sum(r.interest_earned for r in records),
        final_balance=final,
        depleted=depleted,
        capped=not depleted and len(records) >= MAX_YEARS,
    )


@dataclass(frozen=True)
class SIPSummary:
    required_corpus: float
    monthly_sip: float
    years_to_retirement: int
    retirement_duration: int
    total_invested: float
    corpus_at_retirement: float
    final_corpus: float
    depletion_age: int | None


def summarize_sip(result: SIPPlanResult, inputs: SIPInputs) -> SIPSummary:
    depletion_age = None
    for r in result.withdrawal_records:
        if r.end_corpus == 0:
            depletion_age = r.age
            break
    records = result.year_records
    return SIPSummary(
        required_corpus=result.required_corpus,
        monthly_sip=result.monthly_sip,
        years_to_retirement=inputs.years_to_retirement,
        retirement_duration=inputs.years_in_retirement,
        total_invested=sum(r.monthly_investment * MONTHS_PER_YEAR for r in result.accumulation_records),
        corpus_at_retirement=result.corpus_at_retirement,
        final_corpus=records[-1].end_corpus if records else 0.0,
        depletion_age=depletion_age,
    )
