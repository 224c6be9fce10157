"""Tests for calculator inputs and validation."""

import pytest
from retirement_calc import (
    CorpusInputs,
    SIPInputs,
    validate_corpus_inputs,
    validate_sip_inputs,
    check_corpus_inputs,
    check_sip_inputs,
)


def _corpus_raw(**overrides):
    raw = {
        "current_expenses": 1_200_000,
        "current_investment": 10_000_000,
        "expenses_increment_per_year": 6,
        "expected_rate_of_return": 10,
    }
    raw.update(overrides)
    return raw


def _sip_raw(**overrides):
    raw = {
        "current_age": 30,
        "retirement_age": 60,
        "annual_expense": 1_200_000,
        "expected_inflation": 6,
        "expected_return_during_investment": 12,
        "expected_return_after_retirement": 8,
    }
    raw.update(overrides)
    return raw


class TestSIPInputsDerived:
    def test_years(self):
        p = SIPInputs(current_age=30, retirement_age=60)
        assert p.years_to_retirement == 30
        assert p.months_to_retirement == 360
        assert p.years_in_retirement == 30

    def test_frozen(self):
        p = SIPInputs()
        with pytest.raises(AttributeError):
            p.current_age = 40


class TestValidateCorpusInputs:
    def test_valid(self):
        result = validate_corpus_inputs(_corpus_raw())
        assert result.ok
        assert result.errors == []
        assert result.value == CorpusInputs(1_200_000, 10_000_000, 6, 10)

    def test_zero_expenses(self):
        result = validate_corpus_inputs(_corpus_raw(current_expenses=0))
        assert not result.ok
        assert result.value is None
        assert result.errors == ["Annual Expenses must be greater than 0"]

    def test_negative_investment(self):
        result = validate_corpus_inputs(_corpus_raw(current_investment=-5))
        assert result.errors == ["Current Investment must be greater than 0"]

    def test_negative_rates(self):
        result = validate_corpus_inputs(_corpus_raw(expenses_increment_per_year=-1, expected_rate_of_return=-2))
        assert result.errors == [
            "Annual Expense Increase cannot be negative",
            "Expected Rate of Return cannot be negative",
        ]

    def test_zero_rates_allowed(self):
        assert validate_corpus_inputs(_corpus_raw(expenses_increment_per_year=0, expected_rate_of_return=0)).ok

    def test_missing_and_non_numeric(self):
        raw = _corpus_raw(current_investment="lots")
        del raw["current_expenses"]
        result = validate_corpus_inputs(raw)
        assert "Annual Expenses must be a number" in result.errors
        assert "Current Investment must be a number" in result.errors

    def test_numeric_strings_accepted(self):
        result = validate_corpus_inputs(_corpus_raw(current_expenses="1500000"))
        assert result.value.current_expenses == 1_500_000

    def test_int_beyond_float_range(self):
        result = validate_corpus_inputs(_corpus_raw(current_expenses=10**400))
        assert result.errors == ["Annual Expenses must be a number"]

    def test_nan_rejected(self):
        result = validate_corpus_inputs(_corpus_raw(expected_rate_of_return=float("nan")))
        assert result.errors == ["Expected Rate of Return must be a number"]


class TestValidateSIPInputs:
    def test_valid(self):
        result = validate_sip_inputs(_sip_raw())
        assert result.ok
        assert result.value == SIPInputs()

    def test_ages_are_ints(self):
        result = validate_sip_inputs(_sip_raw(current_age=30.0, retirement_age="60"))
        assert result.value.current_age == 30
        assert isinstance(result.value.retirement_age, int)

    def test_fractional_age(self):
        result = validate_sip_inputs(_sip_raw(current_age=30.5))
        assert result.errors == ["Current Age must be a whole number"]

    def test_zero_age(self):
        result = validate_sip_inputs(_sip_raw(current_age=0))
        assert result.errors == ["Current Age must be greater than 0"]

    def test_retirement_not_after_current(self):
        result = validate_sip_inputs(_sip_raw(current_age=60, retirement_age=60))
        assert result.errors == ["Retirement Age must be greater than Current Age"]

    def test_retirement_at_90_rejected(self):
        result = validate_sip_inputs(_sip_raw(retirement_age=90))
        assert result.errors == ["Retirement Age must be less than 90"]

    def test_retirement_89_allowed(self):
        assert validate_sip_inputs(_sip_raw(retirement_age=89)).ok

    def test_zero_expense(self):
        result = validate_sip_inputs(_sip_raw(annual_expense=0))
        assert result.errors == ["Annual Expense must be greater than 0"]

    def test_negative_rates_all_reported(self):
        result = validate_sip_inputs(_sip_raw(
            expected_inflation=-1,
            expected_return_during_investment=-1,
            expected_return_after_retirement=-1,
        ))
        assert result.errors == [
            "Expected Inflation cannot be negative",
            "Expected Return During Investment cannot be negative",
            "Expected Return After Retirement cannot be negative",
        ]

    def test_huge_age(self):
        result = validate_sip_inputs(_sip_raw(current_age=10**400))
        assert result.errors == ["Current Age must be a number"]

    def test_bool_is_not_a_number(self):
        result = validate_sip_inputs(_sip_raw(annual_expense=True))
        assert result.errors == ["Annual Expense must be a number"]


class TestCheckInputs:
    def test_corpus_returns_inputs(self):
        assert check_corpus_inputs(_corpus_raw()) == CorpusInputs(1_200_000, 10_000_000, 6, 10)

    def test_corpus_raises(self):
        with pytest.raises(ValueError, match="Current Investment must be greater than 0"):
            check_corpus_inputs(_corpus_raw(current_investment=0))

    def test_sip_raises_with_every_message(self):
        with pytest.raises(ValueError) as exc:
            check_sip_inputs(_sip_raw(retirement_age=95, annual_expense=-1))
        message = str(exc.value)
        assert "Retirement Age must be less than 90" in message
        assert "Annual Expense must be greater than 0" in message
