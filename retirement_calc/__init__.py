"""Retirement corpus drawdown and SIP planning package."""

from retirement_calc.params import (
    CorpusInputs,
    SIPInputs,
    Validation,
    validate_corpus_inputs,
    validate_sip_inputs,
    check_corpus_inputs,
    check_sip_inputs,
    TARGET_AGE,
    MAX_YEARS,
    MONTHS_PER_YEAR,
)
from retirement_calc.simulation import (
    Phase,
    CorpusYearRecord,
    SIPYearRecord,
    SIPPlanResult,
    CorpusSummary,
    SIPSummary,
    run_corpus_depletion,
    run_sip_plan,
    required_corpus,
    required_monthly_sip,
    monthly_rate,
    summarize_corpus,
    summarize_sip,
)
from retirement_calc.currency import Currency, format_currency, format_number

__all__ = [
    "CorpusInputs",
    "SIPInputs",
    "Validation",
    "validate_corpus_inputs",
    "validate_sip_inputs",
    "check_corpus_inputs",
    "check_sip_inputs",
    "TARGET_AGE",
    "MAX_YEARS",
    "MONTHS_PER_YEAR",
    "Phase",
    "CorpusYearRecord",
    "SIPYearRecord",
    "SIPPlanResult",
    "CorpusSummary",
    "SIPSummary",
    "run_corpus_depletion",
    "run_sip_plan",
    "required_corpus",
    "required_monthly_sip",
    "monthly_rate",
    "summarize_corpus",
    "summarize_sip",
    "Currency",
    "format_currency",
    "format_number",
]
