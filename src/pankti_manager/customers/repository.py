from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Customer, Payment


class CustomerRepository(Protocol):
    """Repository interface for customers.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Customer]:
        raise NotImplementedError

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        phone: str,
        location: str,
        work_amount: Decimal,
        advance_amount: Decimal,
        work_completed: bool,
        address: Optional[str] = None,
        referred_by: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        customer_id: int,
        name: str,
        phone: str,
        location: str,
        work_amount: Decimal,
        advance_amount: Decimal,
        work_completed: bool,
        address: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, customer_id: int) -> bool:
        """Delete the customer together with all of its payments."""

        raise NotImplementedError


class PaymentRepository(Protocol):
    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

    def list_for_customer(self, customer_id: int) -> Sequence[Payment]:
        raise NotImplementedError

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def create(self, *, customer_id: int, amount: Decimal, payment_mode: str, notes: Optional[str] = None) -> int:
        raise NotImplementedError

    def update(self, *, payment_id: int, amount: Decimal, payment_mode: str, notes: Optional[str] = None) -> bool:
        raise NotImplementedError

    def delete(self, payment_id: int) -> bool:
        raise NotImplementedError
