from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple

from restaurant.core.config import settings

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a number to a 2-place Decimal without going through float."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def member_discount_rate() -> Decimal:
    return Decimal(settings.MEMBER_DISCOUNT_PERCENT) / Decimal(100)


@dataclass(frozen=True)
class LinePrice:
    base_price: Decimal
    discount_applied: Decimal
    final_price: Decimal
    is_member: bool


def price_line(base_price, is_member: bool, rate: Optional[Decimal] = None) -> LinePrice:
    """
    Per-unit price of one order line.

    Members get a flat discount (20% unless configured otherwise) taken off
    the unit price; everyone else pays the menu price.
    """
    base = to_money(base_price)
    if not is_member:
        return LinePrice(base, to_money(0), base, False)
    rate = member_discount_rate() if rate is None else rate
    discount = to_money(base * rate)
    return LinePrice(base, discount, base - discount, True)


def line_total(unit_price, quantity: int) -> Decimal:
    return to_money(to_money(unit_price) * quantity)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    discount_applied: Decimal
    total: Decimal


def summarize_lines(lines: Iterable[Tuple[LinePrice, int]]) -> OrderTotals:
    """Aggregate priced lines: unit amounts times quantity, summed."""
    subtotal = discount = total = to_money(0)
    for price, quantity in lines:
        subtotal += line_total(price.base_price, quantity)
        discount += line_total(price.discount_applied, quantity)
        total += line_total(price.final_price, quantity)
    return OrderTotals(subtotal=subtotal, discount_applied=discount, total=total)
