"""Value Objects shared across the procurement domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow

from procurement.domain.exceptions import ValidationError

VALID_CURRENCY_CODES = ("USD", "EUR", "GBP", "JPY")

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Currency:
    """One of the currencies the procurement context trades in."""

    code: str

    def __post_init__(self) -> None:
        if self.code not in VALID_CURRENCY_CODES:
            raise ValidationError(
                f"Invalid currency code: {self.code!r}. "
                f"Valid codes are: {', '.join(VALID_CURRENCY_CODES)}"
            )

    def __str__(self) -> str:
        return self.code


def _to_decimal(value: object, label: str) -> Decimal:
    """Convert an int, float or Decimal to a finite Decimal.

    Floats go through their shortest repr so that ``0.125`` becomes
    ``Decimal("0.125")`` rather than its binary expansion.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValidationError(
            f"{label} must be a number, got {type(value).__name__}"
        )
    result = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    if not result.is_finite():
        raise ValidationError(f"{label} must be a finite number, got {value}")
    return result


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount bound to a Currency.

    The amount is held as a Decimal quantized to whole cents using
    ROUND_HALF_UP, so arithmetic never drifts the way binary floats do.
    Every operation returns a new instance.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount, "Money amount")
        if amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {amount}"
            )
        if not isinstance(self.currency, Currency):
            raise ValidationError(
                f"Money currency must be a Currency, got {type(self.currency).__name__}"
            )
        try:
            amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValidationError(f"Money amount is too large: {amount}") from exc
        # Decimal("-0") passes the sign check above; store it unsigned.
        object.__setattr__(self, "amount", amount.copy_abs())

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise ValidationError(
                f"Can only add Money to Money, got {type(other).__name__}"
            )
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, multiplier: int | float | Decimal) -> Money:
        factor = _to_decimal(multiplier, "Multiplier")
        if factor < 0:
            raise ValidationError(
                f"Multiplier must be non-negative, got {multiplier}"
            )
        try:
            product = self.amount * factor
        except Overflow as exc:
            raise ValidationError(
                f"Money amount is too large: {self.amount} * {factor}"
            ) from exc
        return Money(product, self.currency)

    __add__ = add
    __mul__ = multiply
    __rmul__ = multiply

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.code}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise ValidationError(
                f"Can only compare Money with Money, got {type(other).__name__}"
            )
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: Currency) -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: Currency | str = "USD",
    ) -> Money:
        """Convenient factory that coerces strings and currency codes."""
        if isinstance(currency, str):
            currency = Currency(currency)
        if isinstance(amount, str):
            try:
                amount = Decimal(amount.strip())
            except InvalidOperation as exc:
                raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(amount, currency)
