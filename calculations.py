"""
Interest formulas for the Interest Calculator
"""

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = 1


@dataclass(frozen=True)
class InterestInput:
    principal: float
    rate_percent: float
    time_years: float
    frequency_per_year: int = DEFAULT_FREQUENCY


@dataclass(frozen=True)
class InterestResult:
    interest: float
    total: float

    def as_dict(self):
        return {'interest': self.interest, 'total': self.total}


# Decimal grammar of Java's Double.valueOf, without hexadecimal literals
_DECIMAL_RE = re.compile(
    r'[\x00-\x20]*'
    r'([+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))[fFdD]?'
    r'[\x00-\x20]*',
    re.ASCII,
)
_INTEGER_RE = re.compile(r'[+-]?(\d+)', re.ASCII)

MAX_FREQUENCY = 2 ** 31 - 1


def _int_to_float(value):
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def parse_amount(value) -> float:
    """Convert field text to a float, 0.0 when it is not a number"""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if value is None:
        return 0.0
    match = _DECIMAL_RE.fullmatch(str(value))
    if match is None:
        return 0.0
    return float(match.group(1))


def normalize_frequency(value) -> int:
    """Return compounding periods per year, falling back to annual compounding.

    Accepts ints, integral floats and integer text (no surrounding spaces)
    within 1..MAX_FREQUENCY. Anything else gives DEFAULT_FREQUENCY.
    """
    n = None
    if isinstance(value, bool):
        n = None
    elif isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if value.is_integer():
            n = int(value)
    elif isinstance(value, str):
        match = _INTEGER_RE.fullmatch(value)
        # more than ten significant digits is outside the int32 range anyway
        digits = match.group(1).lstrip("0") if match else ""
        if match and len(digits) <= 10:
            n = int(digits or "0")
            if value.startswith("-"):
                n = -n

    if n is None or n <= 0 or n > MAX_FREQUENCY:
        logger.debug("Invalid compounding frequency %r, using %d", value, DEFAULT_FREQUENCY)
        return DEFAULT_FREQUENCY
    return n


def _power(base, exponent):
    """Real-valued power: NaN where undefined, signed infinity on overflow"""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf


def compute_simple_interest(principal, rate_percent, time_years) -> InterestResult:
    """Calculate simple interest"""
    interest = principal * rate_percent * time_years / 100
    return InterestResult(interest=interest, total=principal + interest)


def compute_compound_interest(principal, rate_percent, time_years, frequency_per_year=DEFAULT_FREQUENCY) -> InterestResult:
    """Calculate compound interest.

    total = P * (1 + R / (100 * n)) ** (n * T), with n replaced by 1 when the
    frequency is not a positive integer.
    """
    n = normalize_frequency(frequency_per_year)
    total = principal * _power(1 + rate_percent / (100.0 * n), n * time_years)
    # total is rebuilt from interest so total == principal + interest exactly
    interest = total - principal
    return InterestResult(interest=interest, total=principal + interest)


def compute(data: InterestInput, compound=False) -> InterestResult:
    if compound:
        return compute_compound_interest(data.principal, data.rate_percent,
                                         data.time_years, data.frequency_per_year)
    return compute_simple_interest(data.principal, data.rate_percent, data.time_years)


def compute_simple_interest_from_text(principal, rate, time_years) -> InterestResult:
    """Calculate simple interest from raw field text"""
    return compute_simple_interest(parse_amount(principal), parse_amount(rate), parse_amount(time_years))


def compute_compound_interest_from_text(principal, rate, time_years, frequency) -> InterestResult:
    """Calculate compound interest from raw field text"""
    return compute_compound_interest(parse_amount(principal), parse_amount(rate),
                                     parse_amount(time_years), normalize_frequency(frequency))
