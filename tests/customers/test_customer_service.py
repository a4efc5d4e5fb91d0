from __future__ import annotations

from decimal import Decimal

import pytest

from pankti_manager.core.exceptions import ValidationError
from pankti_manager.customers.service import CustomerService

from fakes import InMemoryCustomers, InMemoryPayments


def _service():
    payments = InMemoryPayments()
    customers = InMemoryCustomers(payments)
    return CustomerService(customers, payments), customers, payments


def _add(svc, **overrides):
    fields = dict(name="Asha", phone="9811111111", location="Pune", work_amount="10000", advance_amount="2000")
    fields.update(overrides)
    return svc.add_customer(**fields)


def test_add_customer_parses_amounts():
    svc, customers, _ = _service()

    cid = _add(svc, referred_by="  Ravi ")

    c = customers.get_by_id(cid)
    assert c.work_amount == Decimal("10000")
    assert c.advance_amount == Decimal("2000")
    assert c.referred_by == "Ravi"
    assert c.work_completed is False


def test_add_customer_defaults_blank_advance_to_zero():
    svc, customers, _ = _service()

    cid = _add(svc, advance_amount="")

    assert customers.get_by_id(cid).advance_amount == Decimal("0")


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": ""}, "Name"),
        ({"location": "  "}, "Location"),
        ({"work_amount": "0"}, "work amount"),
        ({"work_amount": "abc"}, "work amount"),
        ({"advance_amount": "-5"}, "advance amount"),
        ({"advance_amount": "20000"}, "cannot be greater"),
    ],
)
def test_add_customer_rejects_invalid_input(overrides, message):
    svc, customers, _ = _service()

    with pytest.raises(ValidationError, match=message):
        _add(svc, **overrides)
    assert customers.list_all() == []


def test_delete_customer_removes_its_payments():
    svc, customers, payments = _service()
    keep = _add(svc, name="Keep")
    gone = _add(svc, name="Gone")
    svc.add_payment(keep, amount="100")
    svc.add_payment(gone, amount="200")
    svc.add_payment(gone, amount="300")

    svc.delete_customer(gone)

    assert customers.get_by_id(gone) is None
    assert [p.customer_id for p in payments.list_all()] == [keep]


def test_add_payment_validates_amount_and_mode():
    svc, _, _ = _service()
    cid = _add(svc)

    with pytest.raises(ValidationError):
        svc.add_payment(cid, amount="0")
    with pytest.raises(ValidationError):
        svc.add_payment(cid, amount="100", payment_mode="barter")
    with pytest.raises(ValidationError, match="Customer not found"):
        svc.add_payment(999, amount="100")


def test_payment_history_reports_total_and_balance():
    svc, _, _ = _service()
    cid = _add(svc)
    svc.add_payment(cid, amount="3000", payment_mode="upi")
    svc.add_payment(cid, amount="1000", payment_mode="cheque", notes="final")

    history = svc.payment_history(cid)

    assert history.total_paid == Decimal("4000")
    assert history.balance == Decimal("4000")
    assert len(history.payments) == 2


def test_update_payment_changes_amount():
    svc, _, _ = _service()
    cid = _add(svc)
    pid = svc.add_payment(cid, amount="500")

    updated = svc.update_payment(pid, amount="750", payment_mode="bank_transfer", notes=" ")

    assert updated.amount == Decimal("750")
    assert updated.payment_mode == "bank_transfer"
    assert updated.notes is None


def test_update_customer_keeps_advance_rule():
    svc, _, _ = _service()
    cid = _add(svc)

    with pytest.raises(ValidationError):
        svc.update_customer(cid, name="Asha", phone="1", location="Pune", work_amount="100", advance_amount="200")

    updated = svc.update_customer(
        cid, name="Asha P", phone="1", location="Pune", work_amount="100", advance_amount="50", work_completed=True
    )
    assert updated.name == "Asha P"
    assert updated.work_completed is True


def test_referral_suggestions_are_unique_names():
    svc, _, _ = _service()
    _add(svc, name="Asha")
    _add(svc, name="Ravi")
    _add(svc, name="Asha")

    assert sorted(svc.referral_suggestions()) == ["Asha", "Ravi"]
