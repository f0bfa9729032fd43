"""
Currency conversion against public exchange-rate APIs.

Parses queries like "10 usd to eur" or "convert 5 pounds yen" and looks up a
live rate. Every failure is reported as None so the caller can move on.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import requests

from ..core.config import CURRENCY_ALIASES, LAUNCHER_CONFIG

logger = logging.getLogger("Currency")


@dataclass(frozen=True)
class CurrencyQuery:
    """A parsed conversion request."""

    amount: float
    from_code: str
    to_code: str


@dataclass(frozen=True)
class CurrencyConversion:
    """A finished conversion."""

    from_code: str
    to_code: str
    amount: float
    converted: float


def normalize_currency_code(code: str) -> Optional[str]:
    """Map a currency name or code to its ISO code.

    Args:
        code: User input such as 'usd', 'euros' or 'sek'

    Returns:
        The upper-case ISO code, or None if the input is not a currency
    """
    alias = CURRENCY_ALIASES.get(code.lower())
    if alias:
        return alias
    if len(code) == 3:
        return code.upper()
    return None


def parse_currency_query(query: str) -> Optional[CurrencyQuery]:
    """Parse '[convert] <amount> <from> [to] <to>'."""
    parts = query.split()
    if parts and parts[0].lower() == "convert":
        parts = parts[1:]

    if len(parts) == 4 and parts[2].lower() == "to":
        amount_str, from_str, to_str = parts[0], parts[1], parts[3]
    elif len(parts) == 3:
        amount_str, from_str, to_str = parts
    else:
        return None

    try:
        amount = float(amount_str)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None

    from_code = normalize_currency_code(from_str)
    to_code = normalize_currency_code(to_str)
    if from_code is None or to_code is None:
        return None

    return CurrencyQuery(amount, from_code, to_code)


def _rate_from_response(response: requests.Response, to_code: str) -> Optional[float]:
    if not response.ok:
        logger.debug("Rate lookup returned HTTP %s", response.status_code)
        return None
    try:
        rate = response.json()["rates"][to_code]
        return float(rate)
    except (ValueError, KeyError, TypeError) as e:
        logger.debug("No usable %s rate in response: %s", to_code, e)
        return None


def fetch_rate(from_code: str, to_code: str, session=None) -> Optional[float]:
    """Look up the exchange rate from one currency to another.

    The fallback API is only used when the primary request itself fails
    (connection error, timeout); an error status from the primary is final.

    Args:
        from_code: ISO code to convert from
        to_code: ISO code to convert to
        session: Optional requests session (or module) used for the calls

    Returns:
        The rate, or None if it could not be determined
    """
    http = session or requests
    config = LAUNCHER_CONFIG["currency"]
    timeout = config["timeout"]

    try:
        response = http.get(config["primary_url"].format(from_code), timeout=timeout)
    except requests.RequestException as e:
        logger.debug("Primary rate lookup failed, trying fallback: %s", e)
    else:
        return _rate_from_response(response, to_code)

    try:
        response = http.get(config["fallback_url"].format(from_code), timeout=timeout)
    except requests.RequestException as e:
        logger.debug("Fallback rate lookup failed: %s", e)
        return None
    return _rate_from_response(response, to_code)


def convert_currency(query: str, session=None) -> Optional[CurrencyConversion]:
    """Parse and convert a currency query.

    Same-currency conversions are echoed back without a network call.
    """
    parsed = parse_currency_query(query)
    if parsed is None:
        return None

    if parsed.from_code == parsed.to_code:
        return CurrencyConversion(
            parsed.from_code, parsed.to_code, parsed.amount, parsed.amount
        )

    rate = fetch_rate(parsed.from_code, parsed.to_code, session=session)
    if rate is None:
        return None

    return CurrencyConversion(
        parsed.from_code, parsed.to_code, parsed.amount, parsed.amount * rate
    )
