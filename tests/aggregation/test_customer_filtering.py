from __future__ import annotations

from decimal import Decimal

from pankti_manager.aggregation import filter_and_sort_customers, index_payments_by_customer

from fakes import customer, payment


def _ids(rows):
    return [r.customer.customer_id for r in rows]


def _snapshot():
    customers = [
        customer(1, "1000", name="Asha Patil", phone="9811111111", location="Pune"),
        customer(2, "5000", name="Ravi Kumar", phone="9822222222", location="Nashik"),
        customer(3, "2000", name="Meena", phone="9833333333", location="Mumbai"),
        customer(4, "5000", name="Overpaid Co", phone="9844444444", location="Pune"),
        customer(5, "3000", name="Kiran", phone="9855555555", location="Satara"),
    ]
    payments = [
        payment(1, 3, "2000"),  # settled exactly
        payment(2, 4, "6000"),  # overpaid
        payment(3, 5, "2000"),  # 1000 pending, ties with customer 1
    ]
    return customers, index_payments_by_customer(payments)


def test_search_matches_name_phone_or_location_case_insensitive():
    customers, by_customer = _snapshot()

    assert _ids(filter_and_sort_customers(customers, by_customer, "ASHA")) == [1]
    assert _ids(filter_and_sort_customers(customers, by_customer, "98222")) == [2]
    assert _ids(filter_and_sort_customers(customers, by_customer, "pune")) == [1, 4]


def test_empty_search_matches_everything():
    customers, by_customer = _snapshot()

    assert _ids(filter_and_sort_customers(customers, by_customer, "")) == [1, 2, 3, 4, 5]
    assert _ids(filter_and_sort_customers(customers, by_customer, None)) == [1, 2, 3, 4, 5]


def test_pending_filter_keeps_only_positive_pending():
    customers, by_customer = _snapshot()

    rows = filter_and_sort_customers(customers, by_customer, "", "pending")

    assert _ids(rows) == [1, 2, 5]
    assert all(r.pending > 0 for r in rows)


def test_overpaid_customer_is_classified_completed():
    customers, by_customer = _snapshot()

    rows = filter_and_sort_customers(customers, by_customer, "", "completed")

    assert _ids(rows) == [3, 4]
    assert rows[1].pending == Decimal("0")


def test_sort_desc_and_asc_keep_ties_in_input_order():
    customers, by_customer = _snapshot()

    desc = filter_and_sort_customers(customers, by_customer, "", "all", "desc")
    asc = filter_and_sort_customers(customers, by_customer, "", "all", "asc")

    assert _ids(desc) == [2, 1, 5, 3, 4]
    assert _ids(asc) == [3, 4, 1, 5, 2]
    # tied groups (1, 5) and (3, 4) appear in the same relative order both ways
    assert [i for i in _ids(desc) if i in (1, 5)] == [i for i in _ids(asc) if i in (1, 5)]
    assert [i for i in _ids(desc) if i in (3, 4)] == [i for i in _ids(asc) if i in (3, 4)]


def test_no_sort_preserves_input_order_and_does_not_mutate_input():
    customers, by_customer = _snapshot()
    before = list(customers)

    rows = filter_and_sort_customers(customers, by_customer, "", "all", "none")

    assert _ids(rows) == [1, 2, 3, 4, 5]
    assert customers == before


def test_repeated_calls_give_identical_results():
    customers, by_customer = _snapshot()

    first = filter_and_sort_customers(customers, by_customer, "", "pending", "desc")
    second = filter_and_sort_customers(customers, by_customer, "", "pending", "desc")

    assert first == second


def test_whitespace_search_is_a_plain_substring_match():
    customers, by_customer = _snapshot()

    assert _ids(filter_and_sort_customers(customers, by_customer, "   ")) == []
