from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..common.decoding import to_amount, to_datetime, to_optional_str
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_list, fetchone
from .model import Customer
from .repository import CustomerRepository

logger = logging.getLogger(__name__)

_COLUMNS = """
    id, name, address, phone_number, location, work_amount, advance_amount,
    work_completed, referred_by, created_at
"""


def row_to_customer(r: dict) -> Customer:
    return Customer(
        customer_id=int(r["id"]),
        name=str(r["name"]),
        phone=str(r.get("phone_number") or ""),
        location=str(r.get("location") or ""),
        work_amount=to_amount(r.get("work_amount")),
        advance_amount=to_amount(r.get("advance_amount")),
        work_completed=bool(r.get("work_completed") or False),
        address=to_optional_str(r.get("address")),
        referred_by=to_optional_str(r.get("referred_by")),
        created_at=to_datetime(r.get("created_at")),
    )


class MySQLCustomerRepository(CustomerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Customer]:
        return fetch_list(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM customers ORDER BY created_at DESC, id DESC",
            (),
            row_to_customer,
            what="customers",
        )

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM customers WHERE id=%s", (customer_id,))
            row = fetchone(cur)
            return row_to_customer(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO customers(name, address, phone_number, location, work_amount,
                                      advance_amount, work_completed, referred_by)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, address, phone, location, work_amount, advance_amount, int(work_completed), referred_by),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE customers
                SET name=%s, address=%s, phone_number=%s, location=%s,
                    work_amount=%s, advance_amount=%s, work_completed=%s
                WHERE id=%s
                """,
                (name, address, phone, location, work_amount, advance_amount, int(work_completed), customer_id),
            )
            return cur.rowcount > 0

    def delete(self, customer_id: int) -> bool:
        # Payments first, then the customer, in one transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM transactions WHERE customer_id=%s", (customer_id,))
            removed_payments = cur.rowcount
            cur.execute("DELETE FROM customers WHERE id=%s", (customer_id,))
            deleted = cur.rowcount > 0
        if deleted:
            logger.info("Deleted customer %s and %s payment(s)", customer_id, removed_payments)
        return deleted
