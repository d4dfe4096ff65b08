from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP, getcontext
from typing import Iterable, List

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")
TOLERANCE = Decimal("0.01")


def to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 don't drag binary noise along
    return Decimal(str(value))


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def split_equally(amount, count: int) -> List[Decimal]:
    """
    Split `amount` into `count` cent shares that add up exactly.

    Leftover cents go to the first shares:
        split_equally(10, 3) -> [3.34, 3.33, 3.33]
    """
    if count <= 0:
        return []

    total = qround(to_decimal(amount))
    base = (total / count).quantize(CENTS, rounding=ROUND_DOWN)
    remainder = int((total - base * count) / CENTS)

    return [base + CENTS if i < remainder else base for i in range(count)]


def is_settled(amounts: Iterable[Decimal], tolerance: Decimal = TOLERANCE) -> bool:
    return all(abs(to_decimal(a)) <= tolerance for a in amounts)
