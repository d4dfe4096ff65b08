from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Sequence

from app.core.utils import ZERO, qround, to_decimal


def compute_occasion_stats(people: Sequence, expenses: Sequence) -> dict:
    """
    Totals for an occasion's expenses.

    Returns:
        {
            total_spent, expense_count,
            by_category: [{category, amount, share}],
            by_person:   [{person_id, person_name, amount}],
        }

    `share` is the category's percentage of total_spent (one decimal).
    Subgroup-paid expenses count toward the totals but not toward by_person.
    """
    names = {p.id: p.name for p in people}
    total = ZERO
    by_category: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    by_person: Dict[int, Decimal] = defaultdict(lambda: ZERO)

    for exp in expenses:
        amount = to_decimal(exp.amount)
        total += amount
        by_category[exp.category or "general"] += amount

        payer_id = getattr(exp, "payer_person_id", None)
        if payer_id is not None and payer_id in names:
            by_person[payer_id] += amount

    categories = sorted(by_category.items(), key=lambda kv: kv[1], reverse=True)
    payers = sorted(by_person.items(), key=lambda kv: kv[1], reverse=True)

    return {
        "total_spent": qround(total),
        "expense_count": len(expenses),
        "by_category": [
            {
                "category": category,
                "amount": qround(amount),
                "share": (amount / total * 100).quantize(Decimal("0.1")) if total else Decimal("0.0"),
            }
            for category, amount in categories
        ],
        "by_person": [
            {"person_id": pid, "person_name": names[pid], "amount": qround(amount)}
            for pid, amount in payers
        ],
    }


def _totals_for(member_ids: set, expenses: Iterable, splits: Iterable, settlements: Iterable) -> dict:
    paid = owing = settled_out = settled_in = ZERO
    expense_count = 0

    for exp in expenses:
        if getattr(exp, "payer_person_id", None) in member_ids:
            paid += to_decimal(exp.amount)
            expense_count += 1

    for s in splits:
        if s.person_id in member_ids:
            owing += to_decimal(s.amount)

    for st in settlements:
        if getattr(st, "from_person_id", None) in member_ids:
            settled_out += to_decimal(st.amount)
        if getattr(st, "to_person_id", None) in member_ids:
            settled_in += to_decimal(st.amount)

    balance = paid - owing + settled_out - settled_in

    return {
        "total_paid": qround(paid),
        "total_owing": qround(owing),
        "settlements_from": qround(settled_out),
        "settlements_to": qround(settled_in),
        "balance": qround(balance),
        "total_owed": qround(balance) if balance > 0 else ZERO,
        "total_owing_net": qround(-balance) if balance < 0 else ZERO,
        "expense_count": expense_count,
    }


def compute_person_stats(person_id: int, expenses: Sequence, splits: Sequence, settlements: Sequence) -> dict:
    return _totals_for({person_id}, expenses, splits, settlements)


def compute_subgroup_stats(member_ids: Sequence[int], expenses: Sequence, splits: Sequence, settlements: Sequence) -> dict:
    """Same totals as a person, summed over every member of the subgroup."""
    stats = _totals_for(set(member_ids), expenses, splits, settlements)
    stats["member_count"] = len(set(member_ids))
    return stats
