"""Tests for TOML config loading and CLI > config > default resolution."""

import argparse
import sys

import pytest
from retirement_calc.config import (
    CORPUS_DEFAULTS,
    SIP_DEFAULTS,
    create_parser,
    load_config,
    parse_args,
    resolve,
    resolve_currency,
)
from retirement_calc.currency import Currency


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_sections(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            'currency = "USD"\n'
            "[corpus]\n"
            "current_expenses = 50000\n"
            "[sip]\n"
            "retirement_age = 55\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config["currency"] == "USD"
        assert config["corpus"] == {"current_expenses": 50000}
        assert config["sip"] == {"retirement_age": 55}

    def test_camel_case_keys_normalized(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[sip]\n"
            "currentAge = 35\n"
            "expectedReturnAfterRetirement = 7.5\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config["sip"] == {"current_age": 35, "expected_return_after_retirement": 7.5}

    def test_invalid_toml_exits(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text("[corpus\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            load_config(path)
        assert exc.value.code == 1
        assert "Failed to read config file" in capsys.readouterr().err


class TestResolve:
    def test_priority(self):
        args = argparse.Namespace(current_expenses=1.0, current_investment=None)
        config = {"current_investment": 2.0, "expected_rate_of_return": 3.0}
        r = resolve(args, config, CORPUS_DEFAULTS)
        assert r["current_expenses"] == 1.0  # CLI
        assert r["current_investment"] == 2.0  # config
        assert r["expected_rate_of_return"] == 3.0  # config
        assert r["expenses_increment_per_year"] == CORPUS_DEFAULTS["expenses_increment_per_year"]

    def test_defaults_cover_every_field(self):
        assert set(SIP_DEFAULTS) == {
            "current_age",
            "retirement_age",
            "annual_expense",
            "expected_inflation",
            "expected_return_during_investment",
            "expected_return_after_retirement",
        }


class TestCreateParser:
    def test_sip_flags(self):
        parser = create_parser("test", "sip")
        args = parser.parse_args(["--retirement-age", "55", "--expected-inflation", "5.5", "--currency", "EUR"])
        assert args.retirement_age == 55
        assert args.expected_inflation == 5.5
        assert args.currency == "EUR"
        assert args.current_age is None

    def test_corpus_flags_accept_decimals(self):
        parser = create_parser("test", "corpus")
        args = parser.parse_args(["--current-expenses", "1500000.5"])
        assert args.current_expenses == 1500000.5

    def test_all_registers_both_calculators(self):
        parser = create_parser("test", "all")
        args = parser.parse_args(["--current-expenses", "900000", "--retirement-age", "58"])
        assert args.current_expenses == 900000.0
        assert args.retirement_age == 58
        assert args.annual_expense is None

    def test_shared_only(self):
        args = create_parser("test").parse_args([])
        assert not hasattr(args, "current_age")


class TestResolveCurrency:
    def test_cli_wins(self):
        args = argparse.Namespace(currency="USD")
        assert resolve_currency(args, {"currency": "EUR"}) is Currency.USD

    def test_config_then_default(self):
        args = argparse.Namespace(currency=None)
        assert resolve_currency(args, {"currency": "eur"}) is Currency.EUR
        assert resolve_currency(args, {}) is Currency.INR

    def test_unknown_in_config_exits(self, capsys):
        args = argparse.Namespace(currency=None)
        with pytest.raises(SystemExit) as exc:
            resolve_currency(args, {"currency": "GBP"})
        assert exc.value.code == 1
        assert "Unknown currency 'GBP'" in capsys.readouterr().err


class TestParseArgs:
    def test_resolves_one_section(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config.toml").write_text(
            'currency = "USD"\n[sip]\nannual_expense = 800000\n[corpus]\ncurrent_expenses = 1\n',
            encoding="utf-8",
        )
        monkeypatch.setattr(sys, "argv", ["prog", "--retirement-age", "50"])
        r, currency, _ = parse_args("test", "sip")
        assert currency is Currency.USD
        assert r["retirement_age"] == 50
        assert r["annual_expense"] == 800000
        assert "current_expenses" not in r
