"""
Required-field checks run before a calculation is attempted
"""

from enum import Enum
from typing import Mapping, Optional, Set


class ValidationPolicy(Enum):
    """Whether blank fields stop a calculation"""

    ENFORCE = 'enforce'
    DISABLED = 'disabled'

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        text = str(value or '').strip().lower()
        if text in ('enforce', 'on', 'true'):
            return cls.ENFORCE
        if text in ('disabled', 'off', 'none', 'false'):
            return cls.DISABLED
        raise ValueError(f"Unknown validation policy: {value!r}")


def is_blank(value) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def validate_required(fields: Mapping[str, Optional[str]]) -> Set[str]:
    """Return the names of fields that are empty or whitespace-only"""
    return {name for name, value in fields.items() if is_blank(value)}


def blocking_fields(fields: Mapping[str, Optional[str]], policy=ValidationPolicy.ENFORCE) -> Set[str]:
    """Fields that prevent a calculation under the given policy"""
    if ValidationPolicy.from_value(policy) is ValidationPolicy.DISABLED:
        return set()
    return validate_required(fields)
