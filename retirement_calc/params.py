"""Calculator inputs and their validation."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

# Withdrawal horizon: plans run until this age
TARGET_AGE = 90
# Safety cap on simulated years (records) per run
MAX_YEARS = 100
MONTHS_PER_YEAR = 12

T = TypeVar("T")


@dataclass(frozen=True)
class CorpusInputs:
    """Fixed fund drawn down by an inflating yearly expense. Rates are percent."""

    current_expenses: float = 1_200_000.0
    current_investment: float = 10_000_000.0
    expenses_increment_per_year: float = 6.0
    expected_rate_of_return: float = 10.0


@dataclass(frozen=True)
class SIPInputs:
    """Monthly savings plan toward a corpus that lasts until TARGET_AGE. Rates are percent."""

    current_age: int = 30
    retirement_age: int = 60
    annual_expense: float = 1_200_000.0
    expected_inflation: float = 6.0
    expected_return_during_investment: float = 12.0
    expected_return_after_retirement: float = 8.0

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def months_to_retirement(self) -> int:
        return self.years_to_retirement * MONTHS_PER_YEAR

    @property
    def years_in_retirement(self) -> int:
        return TARGET_AGE - self.retirement_age


@dataclass
class Validation(Generic[T]):
    """Outcome of validating raw inputs: typed value on success, messages on failure."""

    value: T | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


# field name -> display label used in messages
CORPUS_LABELS = {
    "current_expenses": "Annual Expenses",
    "current_investment": "Current Investment",
    "expenses_increment_per_year": "Annual Expense Increase",
    "expected_rate_of_return": "Expected Rate of Return",
}

SIP_LABELS = {
    "current_age": "Current Age",
    "retirement_age": "Retirement Age",
    "annual_expense": "Annual Expense",
    "expected_inflation": "Expected Inflation",
    "expected_return_during_investment": "Expected Return During Investment",
    "expected_return_after_retirement": "Expected Return After Retirement",
}


def _as_number(raw: Mapping, key: str, label: str, errors: list[str]) -> float | None:
    v = raw.get(key)
    if isinstance(v, bool) or v is None:
        errors.append(f"{label} must be a number")
        return None
    try:
        num = float(v)
    except (TypeError, ValueError, OverflowError):
        errors.append(f"{label} must be a number")
        return None
    if not math.isfinite(num):
        errors.append(f"{label} must be a number")
        return None
    return num


def _as_whole(raw: Mapping, key: str, label: str, errors: list[str]) -> int | None:
    num = _as_number(raw, key, label, errors)
    if num is None:
        return None
    if not num.is_integer():
        errors.append(f"{label} must be a whole number")
        return None
    return int(num)


def _require_positive(value: float | None, label: str, errors: list[str]) -> None:
    if value is not None and value <= 0:
        errors.append(f"{label} must be greater than 0")


def _require_non_negative(value: float | None, label: str, errors: list[str]) -> None:
    if value is not None and value < 0:
        errors.append(f"{label} cannot be negative")


def validate_corpus_inputs(raw: Mapping) -> Validation[CorpusInputs]:
    """Validate raw corpus calculator values. Collects every field error."""
    errors: list[str] = []
    L = CORPUS_LABELS
    values = {key: _as_number(raw, key, label, errors) for key, label in L.items()}

    _require_positive(values["current_expenses"], L["current_expenses"], errors)
    _require_positive(values["current_investment"], L["current_investment"], errors)
    _require_non_negative(values["expenses_increment_per_year"], L["expenses_increment_per_year"], errors)
    _require_non_negative(values["expected_rate_of_return"], L["expected_rate_of_return"], errors)

    if errors:
        return Validation(errors=errors)
    return Validation(value=CorpusInputs(**values))


def validate_sip_inputs(raw: Mapping) -> Validation[SIPInputs]:
    """Validate raw SIP calculator values. Collects every field error."""
    errors: list[str] = []
    L = SIP_LABELS
    current_age = _as_whole(raw, "current_age", L["current_age"], errors)
    retirement_age = _as_whole(raw, "retirement_age", L["retirement_age"], errors)
    rates = {
        key: _as_number(raw, key, L[key], errors)
        for key in (
            "annual_expense",
            "expected_inflation",
            "expected_return_during_investment",
            "expected_return_after_retirement",
        )
    }

    _require_positive(current_age, L["current_age"], errors)
    if retirement_age is not None:
        if current_age is not None and retirement_age <= current_age:
            errors.append(f"{L['retirement_age']} must be greater than {L['current_age']}")
        if retirement_age >= TARGET_AGE:
            errors.append(f"{L['retirement_age']} must be less than {TARGET_AGE}")
    _require_positive(rates["annual_expense"], L["annual_expense"], errors)
    for key in ("expected_inflation", "expected_return_during_investment", "expected_return_after_retirement"):
        _require_non_negative(rates[key], L[key], errors)

    if errors:
        return Validation(errors=errors)
    return Validation(value=SIPInputs(current_age=current_age, retirement_age=retirement_age, **rates))


def check_corpus_inputs(raw: Mapping) -> CorpusInputs:
    """Validate and return CorpusInputs. Raises ValueError listing every problem."""
    result = validate_corpus_inputs(raw)
    if not result.ok:
        raise ValueError("\n".join(result.errors))
    return result.value


def check_sip_inputs(raw: Mapping) -> SIPInputs:
    """Validate and return SIPInputs. Raises ValueError listing every problem."""
    result = validate_sip_inputs(raw)
    if not result.ok:
        raise ValueError("\n".join(result.errors))
    return result.value
