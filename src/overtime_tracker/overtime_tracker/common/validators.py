from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Union

from ..core.exceptions import ValidationError

Amount = Union[int, float, str, Decimal]


def to_amount(value: Amount, field_name: str = "시급") -> Decimal:
    """Convert a currency amount to Decimal.

    Floats go through str() so 10000.1 stays 10000.1 and not its binary expansion.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} 값이 올바르지 않습니다")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).replace(",", "").strip())
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f"{field_name} 값이 올바르지 않습니다") from e

    if not amount.is_finite():
        raise ValidationError(f"{field_name} 값이 올바르지 않습니다")
    return amount


def require_positive_amount(value: Amount, field_name: str = "시급") -> Decimal:
    amount = to_amount(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name}은(는) 0보다 커야 합니다")
    return amount


def amount_to_json(amount: Decimal) -> Union[int, float]:
    """Plain JSON number for a Decimal amount (int when whole)."""
    return int(amount) if amount == amount.to_integral_value() else float(amount)


def require_flag(value: Any, field_name: str) -> bool:
    """A JSON boolean; a missing value reads as False."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} 값은 true 또는 false 여야 합니다")
    return value
