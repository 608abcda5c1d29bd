"""
Field state for the two calculator tabs.

The desktop window only binds widgets to these objects: every decision about
errors, the rate slider and what the result card shows is made here, so the
behaviour can be exercised without a display.
"""

import math
from abc import ABC, abstractmethod

import config
from calculations import (
    compute_compound_interest_from_text,
    compute_simple_interest_from_text,
    parse_amount,
)
from validation import blocking_fields


class InterestForm(ABC):
    """Base form: ordered text fields, per-field error flags and a result"""

    title = ""
    result_label = "Interest"
    default_rate = ""
    # (field name, label, error message) in display order
    fields = ()

    def __init__(self, policy=None):
        self.policy = policy if policy is not None else config.VALIDATION_POLICY
        self.values = {name: "" for name, _, _ in self.fields}
        self.values['rate'] = self.default_rate
        self.errors = {name: False for name, _, _ in self.fields}
        self.result = None

    def labels(self):
        return [(name, label) for name, label, _ in self.fields]

    def error_message(self, name):
        for field_name, _, message in self.fields:
            if field_name == name:
                return message
        raise KeyError(name)

    def visible_errors(self):
        return {name: self.error_message(name) for name, flagged in self.errors.items() if flagged}

    def set_field(self, name, text):
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = text
        self.errors[name] = False

    def set_rate_from_slider(self, value):
        value = min(max(float(value), config.RATE_SLIDER_MIN), config.RATE_SLIDER_MAX)
        self.set_field('rate', "%.2f" % value)

    def slider_value(self):
        value = parse_amount(self.values['rate'])
        if math.isnan(value):
            return config.RATE_SLIDER_MIN
        return min(max(value, config.RATE_SLIDER_MIN), config.RATE_SLIDER_MAX)

    def rate_caption(self):
        return f"Current Rate: {self.values['rate']}%"

    @abstractmethod
    def _compute(self):
        """Run the formula for this tab on the current field text"""

    def calculate(self):
        """Flag blank fields, then compute unless something blocks it"""
        blocked = blocking_fields(self.values, self.policy)
        for name in self.errors:
            self.errors[name] = name in blocked
        if blocked:
            self.result = None
            return None
        self.result = self._compute()
        return self.result

    def result_lines(self):
        if self.result is None:
            return []
        symbol = config.CURRENCY_SYMBOL
        return [
            f"{self.result_label}: {symbol}{self.result.interest:.2f}",
            f"Total Amount: {symbol}{self.result.total:.2f}",
        ]


class SimpleInterestForm(InterestForm):
    title = "Simple Interest"
    result_label = "Simple Interest"
    default_rate = config.DEFAULT_SIMPLE_RATE
    fields = (
        ('principal', f"Principal ({config.CURRENCY_SYMBOL})", "Enter the principal amount"),
        ('time', "Time (years)", "Enter the time"),
        ('rate', "Rate (%)", "Enter the rate"),
    )

    def _compute(self):
        v = self.values
        return compute_simple_interest_from_text(v['principal'], v['rate'], v['time'])


class CompoundInterestForm(InterestForm):
    title = "Compound Interest"
    result_label = "Compound Interest"
    default_rate = config.DEFAULT_COMPOUND_RATE
    fields = (
        ('principal', f"Principal ({config.CURRENCY_SYMBOL})", "Enter the principal amount"),
        ('time', "Time (years)", "Enter the time period"),
        ('frequency', "Compounds per year", "Enter the compounding frequency"),
        ('rate', "Annual Rate (%)", "Enter the annual rate"),
    )

    def _compute(self):
        v = self.values
        return compute_compound_interest_from_text(v['principal'], v['rate'], v['time'], v['frequency'])


def build_forms(policy=None):
    """Forms in tab order"""
    return [SimpleInterestForm(policy), CompoundInterestForm(policy)]
