from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..aggregation import customer_balance
from ..common.decoding import ZERO
from ..common.validators import (
    optional_text,
    require_choice,
    require_non_empty,
    require_non_negative,
    require_positive,
)
from ..core.enums import PaymentMode
from ..core.exceptions import ValidationError
from .model import Customer, Payment
from .repository import CustomerRepository, PaymentRepository

logger = logging.getLogger(__name__)

PAYMENT_MODES = tuple(m.value for m in PaymentMode)


@dataclass(frozen=True)
class PaymentHistory:
    customer: Customer
    payments: list[Payment]
    total_paid: Decimal
    balance: Decimal


class CustomerService:
    """Use case: manage customers and the payments they make."""

    def __init__(self, customers: CustomerRepository, payments: PaymentRepository):
        self._customers = customers
        self._payments = payments

    # -------- Customers --------
    def add_customer(
        self,
        *,
        name: str,
        phone: str,
        location: str,
        work_amount: Any,
        advance_amount: Any = None,
        work_completed: bool = False,
        address: Optional[str] = None,
        referred_by: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        phone = require_non_empty(phone, "Phone")
        location = require_non_empty(location, "Location")
        work, advance = self._check_amounts(work_amount, advance_amount)

        customer_id = self._customers.create(
            name=name,
            phone=phone,
            location=location,
            work_amount=work,
            advance_amount=advance,
            work_completed=bool(work_completed),
            address=optional_text(address),
            referred_by=optional_text(referred_by),
        )
        logger.info("Added customer %s (%s)", customer_id, name)
        return customer_id

    def update_customer(
        self,
        customer_id: int,
        *,
        name: str,
        phone: str,
        location: str,
        work_amount: Any,
        advance_amount: Any = None,
        work_completed: bool = False,
        address: Optional[str] = None,
    ) -> Customer:
        self._require_customer(customer_id)
        work, advance = self._check_amounts(work_amount, advance_amount)

        self._customers.update(
            customer_id=customer_id,
            name=require_non_empty(name, "Name"),
            phone=require_non_empty(phone, "Phone"),
            location=require_non_empty(location, "Location"),
            work_amount=work,
            advance_amount=advance,
            work_completed=bool(work_completed),
            address=optional_text(address),
        )
        return self._require_customer(customer_id)

    def delete_customer(self, customer_id: int) -> None:
        self._require_customer(customer_id)
        if not self._customers.delete(customer_id):
            raise ValidationError("Failed to delete customer")

    def list_customers(self) -> list[Customer]:
        return list(self._customers.list_all())

    def referral_suggestions(self) -> list[str]:
        """Existing customer names offered for the "referred by" field."""

        seen: set[str] = set()
        out: list[str] = []
        for c in self._customers.list_all():
            if c.name not in seen:
                seen.add(c.name)
                out.append(c.name)
        return out

    # -------- Payments --------
    def add_payment(
        self,
        customer_id: int,
        *,
        amount: Any,
        payment_mode: str = PaymentMode.CASH.value,
        notes: Optional[str] = None,
    ) -> int:
        self._require_customer(customer_id)
        payment_id = self._payments.create(
            customer_id=customer_id,
            amount=require_positive(amount, "Amount"),
            payment_mode=require_choice(payment_mode, "Payment mode", PAYMENT_MODES),
            notes=optional_text(notes),
        )
        logger.info("Recorded payment %s for customer %s", payment_id, customer_id)
        return payment_id

    def update_payment(
        self,
        payment_id: int,
        *,
        amount: Any,
        payment_mode: str,
        notes: Optional[str] = None,
    ) -> Payment:
        if not self._payments.get_by_id(payment_id):
            raise ValidationError("Payment not found")

        self._payments.update(
            payment_id=payment_id,
            amount=require_positive(amount, "Amount"),
            payment_mode=require_choice(payment_mode, "Payment mode", PAYMENT_MODES),
            notes=optional_text(notes),
        )
        updated = self._payments.get_by_id(payment_id)
        if not updated:
            raise ValidationError("Payment not found")
        return updated

    def delete_payment(self, payment_id: int) -> None:
        if not self._payments.delete(payment_id):
            raise ValidationError("Failed to delete payment")

    def payment_history(self, customer_id: int) -> PaymentHistory:
        customer = self._require_customer(customer_id)
        payments = list(self._payments.list_for_customer(customer_id))
        return PaymentHistory(
            customer=customer,
            payments=payments,
            total_paid=sum((p.amount for p in payments), ZERO),
            balance=customer_balance(customer, payments),
        )

    def _require_customer(self, customer_id: int) -> Customer:
        customer = self._customers.get_by_id(customer_id)
        if not customer:
            raise ValidationError("Customer not found")
        return customer

    @staticmethod
    def _check_amounts(work_amount: Any, advance_amount: Any) -> tuple[Decimal, Decimal]:
        work = require_positive(work_amount, "Work amount")
        if advance_amount is None or (isinstance(advance_amount, str) and not advance_amount.strip()):
            advance = ZERO
        else:
            advance = require_non_negative(advance_amount, "Advance amount")
        if advance > work:
            raise ValidationError("Advance amount cannot be greater than work amount")
        return work, advance
