"""Unit tests for currency parsing and conversion"""

from unittest.mock import Mock
import sys
import os

import pytest
import requests

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flint.core.config import LAUNCHER_CONFIG
from flint.utils.currency import (
    CurrencyQuery,
    convert_currency,
    fetch_rate,
    normalize_currency_code,
    parse_currency_query,
)

PRIMARY_USD = "https://api.exchangerate-api.com/v4/latest/USD"
FALLBACK_USD = "https://api.frankfurter.app/latest?from=USD"


def make_response(rates=None, ok=True, status_code=200, json_error=None):
    response = Mock()
    response.ok = ok
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = {"rates": rates or {}}
    return response


class TestParseCurrencyQuery:
    """Test the conversion grammar"""

    def test_with_to(self):
        assert parse_currency_query("10 usd to eur") == CurrencyQuery(10.0, "USD", "EUR")

    def test_without_to(self):
        assert parse_currency_query("2.5 gbp jpy") == CurrencyQuery(2.5, "GBP", "JPY")

    def test_convert_prefix_and_aliases(self):
        assert parse_currency_query("Convert 5 pounds to yen") == CurrencyQuery(5.0, "GBP", "JPY")
        assert parse_currency_query("convert 3 dollars euros") == CurrencyQuery(3.0, "USD", "EUR")

    def test_unknown_three_letter_codes_passed_through(self):
        assert parse_currency_query("100 sek nok") == CurrencyQuery(100.0, "SEK", "NOK")

    def test_rejects_other_shapes(self):
        assert parse_currency_query("10 usd in eur") is None
        assert parse_currency_query("10 usd to eur please") is None
        assert parse_currency_query("usd to eur") is None
        assert parse_currency_query("firefox") is None

    def test_rejects_bad_amounts(self):
        assert parse_currency_query("ten usd eur") is None
        assert parse_currency_query("nan usd eur") is None
        assert parse_currency_query("inf usd eur") is None

    def test_rejects_bad_codes(self):
        assert parse_currency_query("10 dollars to xx") is None
        assert parse_currency_query("10 bitcoin eur") is None

    def test_normalize_currency_code(self):
        assert normalize_currency_code("Sterling") == "GBP"
        assert normalize_currency_code("chf") == "CHF"
        assert normalize_currency_code("euroo") is None


class TestFetchRate:
    """Test the rate lookup and its fallback"""

    def setup_method(self):
        self.session = Mock()
        self.timeout = LAUNCHER_CONFIG["currency"]["timeout"]

    def test_primary_success(self):
        self.session.get.return_value = make_response({"EUR": 0.92})

        assert fetch_rate("USD", "EUR", session=self.session) == pytest.approx(0.92)
        self.session.get.assert_called_once_with(PRIMARY_USD, timeout=self.timeout)

    def test_connection_error_uses_fallback(self):
        self.session.get.side_effect = [
            requests.ConnectionError("unreachable"),
            make_response({"EUR": 0.9}),
        ]

        assert fetch_rate("USD", "EUR", session=self.session) == pytest.approx(0.9)
        assert self.session.get.call_count == 2
        self.session.get.assert_called_with(FALLBACK_USD, timeout=self.timeout)

    def test_timeout_uses_fallback(self):
        self.session.get.side_effect = [
            requests.Timeout("slow"),
            make_response({"EUR": 0.9}),
        ]

        assert fetch_rate("USD", "EUR", session=self.session) == pytest.approx(0.9)

    def test_error_status_is_final(self):
        self.session.get.return_value = make_response(ok=False, status_code=500)

        assert fetch_rate("USD", "EUR", session=self.session) is None
        self.session.get.assert_called_once()

    def test_undecodable_body(self):
        self.session.get.return_value = make_response(json_error=ValueError("not json"))

        assert fetch_rate("USD", "EUR", session=self.session) is None
        self.session.get.assert_called_once()

    def test_missing_rate(self):
        self.session.get.return_value = make_response({"GBP": 0.8})

        assert fetch_rate("USD", "EUR", session=self.session) is None

    def test_both_endpoints_fail(self):
        self.session.get.side_effect = requests.ConnectionError("offline")

        assert fetch_rate("USD", "EUR", session=self.session) is None
        assert self.session.get.call_count == 2


class TestConvertCurrency:
    def setup_method(self):
        self.session = Mock()

    def test_conversion(self):
        self.session.get.return_value = make_response({"EUR": 0.92})

        conversion = convert_currency("10 usd to eur", session=self.session)

        assert conversion.from_code == "USD"
        assert conversion.to_code == "EUR"
        assert conversion.amount == 10.0
        assert conversion.converted == pytest.approx(9.2)

    def test_same_currency_skips_network(self):
        conversion = convert_currency("5 usd dollars", session=self.session)

        assert conversion.converted == 5.0
        self.session.get.assert_not_called()

    def test_same_currency_with_bad_amount_declines(self):
        assert convert_currency("five usd usd", session=self.session) is None
        self.session.get.assert_not_called()

    def test_lookup_failure_declines(self):
        self.session.get.side_effect = requests.ConnectionError("offline")

        assert convert_currency("10 usd eur", session=self.session) is None
