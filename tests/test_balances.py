from decimal import Decimal

from app.engine import compute_balances
from factories import expense, person, settlement


def _by_name(balances):
    return {b.person_name: b.balance for b in balances}


def test_scenario_a_one_payer_equal_split(trio):
    exp, splits = expense(1, "30", [1, 2, 3])

    balances = compute_balances(trio, [exp], splits, [])

    assert [b.person_name for b in balances] == ["Alice", "Bob", "Carol"]
    assert _by_name(balances) == {
        "Alice": Decimal("20.00"),
        "Bob": Decimal("-10.00"),
        "Carol": Decimal("-10.00"),
    }


def test_scenario_b_settlement_offsets_debt(trio):
    exp, splits = expense(1, "30", [1, 2, 3])
    paid = settlement(2, 1, "10")

    balances = compute_balances(trio, [exp], splits, [paid])

    assert _by_name(balances) == {
        "Alice": Decimal("10.00"),
        "Bob": Decimal("0.00"),
        "Carol": Decimal("-10.00"),
    }
    assert [b.person_name for b in balances] == ["Alice", "Bob", "Carol"]


def test_scenario_c_three_way_ten_dollars_sums_to_zero(trio):
    exp, splits = expense(2, "10", [1, 2, 3])

    balances = compute_balances(trio, [exp], splits, [])

    assert abs(sum(b.balance for b in balances)) <= Decimal("0.01")
    assert _by_name(balances)["Bob"] == Decimal("6.67")


def test_raw_division_residue_stays_within_a_cent(trio):
    exp, splits = expense(1, "10", [1, 2, 3])
    for s in splits:
        s.amount = Decimal("10") / 3

    balances = compute_balances(trio, [exp], splits, [])

    assert abs(sum(b.balance for b in balances)) <= Decimal("0.01")


def test_every_person_appears_once_even_without_activity():
    people = [person(1, "Alice"), person(2, "Bob"), person(3, "Idle")]
    exp, splits = expense(1, "20", [1, 2])

    balances = compute_balances(people, [exp], splits, [])

    assert len(balances) == len(people)
    assert sorted(b.person_id for b in balances) == [1, 2, 3]
    assert _by_name(balances)["Idle"] == Decimal("0")


def test_sorted_descending_and_ties_keep_input_order():
    people = [person(1, "A"), person(2, "B"), person(3, "C"), person(4, "D")]
    exp, splits = expense(4, "40", [1, 2, 3, 4])

    balances = compute_balances(people, [exp], splits, [])

    assert [b.person_name for b in balances] == ["D", "A", "B", "C"]


def test_same_input_gives_identical_output(trio):
    exp1, s1 = expense(1, "45.50", [1, 2, 3])
    exp2, s2 = expense(3, "12.10", [2, 3])
    history = ([exp1, exp2], s1 + s2, [settlement(2, 1, "5")])

    first = compute_balances(trio, *history)
    second = compute_balances(trio, *history)

    assert first == second
    assert [b.person_id for b in first] == [b.person_id for b in second]


def test_zero_sum_over_mixed_history(trio):
    expenses, splits = [], []
    for payer, amount, between in [
        (1, "99.99", [1, 2, 3]),
        (2, "13.37", [1, 3]),
        (3, "0.05", [1, 2, 3]),
        (1, "250", [2]),
    ]:
        exp, s = expense(payer, amount, between)
        expenses.append(exp)
        splits.extend(s)
    settlements = [settlement(2, 1, "40"), settlement(3, 2, "1.23")]

    balances = compute_balances(trio, expenses, splits, settlements)

    assert sum(b.balance for b in balances) == 0


def test_unknown_people_are_ignored(trio):
    exp, splits = expense(1, "30", [1, 2, 3, 99])
    stranger_paid, stranger_splits = expense(42, "100", [1])
    stray = settlement(99, 2, "5")

    balances = compute_balances(trio, [exp, stranger_paid], splits + stranger_splits, [stray])

    assert _by_name(balances) == {
        "Alice": Decimal("22.50") - Decimal("100"),
        "Bob": Decimal("-7.50") - Decimal("5"),
        "Carol": Decimal("-7.50"),
    }


def test_empty_input():
    assert compute_balances([], [], [], []) == []


def test_subgroup_payer_ignored_by_default(trio, caplog):
    exp, splits = expense(None, "30", [1, 2, 3], subgroup=7)

    with caplog.at_level("WARNING"):
        balances = compute_balances(trio, [exp], splits, [])

    assert all(b.balance == Decimal("-10.00") for b in balances)
    assert "subgroup 7" in caplog.text


def test_subgroup_payer_spread_over_members(trio):
    exp, splits = expense(None, "30", [1, 2, 3], subgroup=7)

    balances = compute_balances(trio, [exp], splits, [], subgroup_members={7: [1, 2]})

    assert _by_name(balances) == {
        "Alice": Decimal("5.00"),
        "Bob": Decimal("5.00"),
        "Carol": Decimal("-10.00"),
    }
    assert sum(b.balance for b in balances) == 0


def test_subgroup_settlement_parties_spread_over_members(trio):
    exp, splits = expense(1, "30", [1, 2, 3])
    paid = settlement(None, 1, "20", from_subgroup=7)

    balances = compute_balances(trio, [exp], splits, [paid], subgroup_members={7: [2, 3]})

    assert all(b.balance == 0 for b in balances)


def test_settlement_with_unknown_people_is_logged_and_skipped(trio, caplog):
    exp, splits = expense(1, "30", [1, 2, 3])
    stray = settlement(77, 88, "5")

    with caplog.at_level("DEBUG", logger="app.engine.balances"):
        balances = compute_balances(trio, [exp], splits, [stray])

    assert _by_name(balances)["Alice"] == Decimal("20.00")
    assert "from unknown person 77" in caplog.text
    assert "to unknown person 88" in caplog.text
