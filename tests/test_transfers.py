from decimal import Decimal

from app.engine import compute_balances, suggest_transfers
from app.schemas.balances import Balance
from factories import expense, person, settlement


def _balances(**amounts):
    return [
        Balance(person_id=i, person_name=name, balance=Decimal(amount))
        for i, (name, amount) in enumerate(amounts.items(), start=1)
    ]


def _as_tuples(transfers):
    return [(t.from_name, t.to_name, t.amount) for t in transfers]


def test_scenario_a_two_transfers_to_alice(trio):
    exp, splits = expense(1, "30", [1, 2, 3])

    transfers = suggest_transfers(compute_balances(trio, [exp], splits, []))

    assert _as_tuples(transfers) == [
        ("Bob", "Alice", Decimal("10")),
        ("Carol", "Alice", Decimal("10")),
    ]


def test_scenario_b_only_carol_left(trio):
    exp, splits = expense(1, "30", [1, 2, 3])

    transfers = suggest_transfers(compute_balances(trio, [exp], splits, [settlement(2, 1, "10")]))

    assert _as_tuples(transfers) == [("Carol", "Alice", Decimal("10"))]
    assert (transfers[0].from_id, transfers[0].to_id) == (3, 1)


def test_scenario_c_terminates_and_clears_everyone(trio):
    exp, splits = expense(1, "10", [1, 2, 3])
    for s in splits:
        s.amount = Decimal("10") / 3

    balances = compute_balances(trio, [exp], splits, [])
    transfers = suggest_transfers(balances)

    assert len(transfers) == 2
    owed = sum(b.balance for b in balances if b.balance > 0)
    assert abs(owed - sum(t.amount for t in transfers)) <= Decimal("0.01")


def test_largest_parties_are_matched_first_every_round():
    transfers = suggest_transfers(_balances(A="50", B="30", C="-40", D="-40"))

    assert _as_tuples(transfers) == [
        ("C", "A", Decimal("40")),
        ("D", "B", Decimal("30")),
        ("D", "A", Decimal("10")),
    ]


def test_balances_within_a_cent_need_nothing():
    assert suggest_transfers(_balances(A="0.01", B="-0.01", C="0")) == []
    assert suggest_transfers(_balances(A="0.004", B="-0.009")) == []


def test_empty_input():
    assert suggest_transfers([]) == []


def test_one_sided_balances_produce_nothing():
    assert suggest_transfers(_balances(A="5", B="3")) == []


def test_custom_tolerance():
    balances = _balances(A="0.50", B="-0.50")

    assert suggest_transfers(balances, tolerance=Decimal("1")) == []
    assert len(suggest_transfers(balances)) == 1


def test_applying_suggestions_settles_everyone():
    people = [person(i, name) for i, name in enumerate("ABCDEF", start=1)]
    expenses, splits = [], []
    for payer, amount, between in [
        (1, "120.00", [1, 2, 3, 4, 5, 6]),
        (2, "47.35", [2, 3, 4]),
        (5, "10.00", [1, 5, 6]),
        (6, "333.33", [1, 2, 3, 4, 5, 6]),
        (3, "7.77", [4]),
    ]:
        exp, s = expense(payer, amount, between)
        expenses.append(exp)
        splits.extend(s)

    balances = compute_balances(people, expenses, splits, [])
    transfers = suggest_transfers(balances)
    assert transfers
    assert len(transfers) <= len(people) - 1

    paid = [settlement(t.from_id, t.to_id, t.amount) for t in transfers]
    after = compute_balances(people, expenses, splits, paid)

    assert all(abs(b.balance) <= Decimal("0.01") for b in after)
    assert suggest_transfers(after) == []


def test_transfer_amounts_are_positive_and_debtor_pays_creditor(trio):
    exp1, s1 = expense(1, "90", [1, 2, 3])
    exp2, s2 = expense(2, "15", [2, 3])

    balances = compute_balances(trio, [exp1, exp2], s1 + s2, [])
    sign = {b.person_id: b.balance for b in balances}

    for t in suggest_transfers(balances):
        assert t.amount > 0
        assert sign[t.from_id] < 0 < sign[t.to_id]
