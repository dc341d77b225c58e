"""
Order number value object.
"""
import random
import string
from dataclasses import dataclass

from shared.domain import ValueObject, utc_now
from ..exceptions import InvalidOrderNumberError

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human-facing, unique order reference."""
    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidOrderNumberError(self.value)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Build ``ORD-<UTC date>-<6 random chars>``, e.g. ``ORD-20240131-7QK2ZD``."""
        suffix = ''.join(random.choices(_SUFFIX_ALPHABET, k=6))
        return cls(value=f"ORD-{utc_now():%Y%m%d}-{suffix}")
