"""Chart generation for calculator results."""

from itertools import accumulate
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from retirement_calc.currency import Currency, axis_unit, format_number
from retirement_calc.params import MONTHS_PER_YEAR
from retirement_calc.simulation import CorpusYearRecord, Phase, SIPPlanResult

COLOR_BALANCE = "#16a34a"     # green
COLOR_INVESTMENT = "#2563eb"  # blue
COLOR_CORPUS = "#16a34a"
COLOR_WITHDRAWAL = "#9333ea"  # purple


def _format_unit_axis(ax: plt.Axes, currency: Currency):
    """Y axis in crore (INR) or millions, full amount on the secondary axis."""
    divisor, unit = axis_unit(currency)
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / divisor:g} {unit}" if x != 0 else "0")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: format_number(round(x), currency))
    )
    ax_right.set_ylabel("")


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_corpus(
    records: tuple[CorpusYearRecord, ...],
    output_path: Path,
    currency: Currency = Currency.INR,
    name: str = "",
) -> Path:
    """Area chart of end-of-year balance for the corpus drawdown.

    Args:
        records: run_corpus_depletion() output.
        output_path: directory to save the PNG.
        currency: display currency for the axis scale.
        name: optional filename suffix (e.g. "base" → corpus-base.png).

    Returns:
        Path to the generated PNG file.
    """
    fig, ax = plt.subplots(figsize=(12, 6))

    years = [r.year for r in records]
    balances = [r.end_balance for r in records]
    ax.fill_between(years, balances, color=COLOR_BALANCE, alpha=0.3)
    ax.plot(years, balances, color=COLOR_BALANCE, linewidth=2, label="Balance")

    ax.set_xlabel("Year")
    ax.set_ylabel(f"Balance ({currency.value})")
    ax.set_title("Corpus Over Time")
    ax.grid(True, alpha=0.3, linestyle="--")
    _format_unit_axis(ax, currency)

    return _save(fig, output_path, "corpus", name)


def plot_sip(
    result: SIPPlanResult,
    output_path: Path,
    currency: Currency = Currency.INR,
    name: str = "",
    show_investment: bool = True,
    show_corpus: bool = True,
    show_withdrawals: bool = True,
) -> Path:
    """Line chart of cumulative investment, corpus and cumulative withdrawals by age.

    A dotted vertical line marks the first withdrawal year.
    """
    fig, ax = plt.subplots(figsize=(14, 7))

    records = result.year_records
    ages = [r.age for r in records]
    invested = list(accumulate(r.monthly_investment * MONTHS_PER_YEAR for r in records))
    withdrawn = list(accumulate(r.withdrawal for r in records))

    if show_investment:
        ax.plot(ages, invested, label="Total Investment", color=COLOR_INVESTMENT, linewidth=2)
    if show_corpus:
        ax.plot(ages, [r.end_corpus for r in records], label="Corpus", color=COLOR_CORPUS, linewidth=2)
    if show_withdrawals:
        ax.plot(ages, withdrawn, label="Total Withdrawals", color=COLOR_WITHDRAWAL, linewidth=2)

    retirement = next((r.age for r in records if r.phase is Phase.WITHDRAWAL), None)
    if retirement is not None:
        ax.axvline(retirement, color="#888888", linewidth=0.8, linestyle=":", alpha=0.6)

    ax.set_xlabel("Age")
    ax.set_ylabel(f"Amount ({currency.value})")
    ax.set_title("SIP Plan: Accumulation and Withdrawal")
    if show_investment or show_corpus or show_withdrawals:
        ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3, linestyle="--")
    _format_unit_axis(ax, currency)

    return _save(fig, output_path, "sip", name)
