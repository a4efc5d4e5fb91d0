from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..common.decoding import to_amount, to_datetime, to_optional_str
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_list, fetchone
from .model import Payment
from .repository import PaymentRepository

_COLUMNS = "id, customer_id, amount, payment_mode, notes, created_at"


def row_to_payment(r: dict) -> Payment:
    return Payment(
        payment_id=int(r["id"]),
        customer_id=int(r["customer_id"]),
        amount=to_amount(r.get("amount")),
        payment_mode=str(r.get("payment_mode") or "other"),
        notes=to_optional_str(r.get("notes")),
        created_at=to_datetime(r.get("created_at")),
    )


class MySQLPaymentRepository(PaymentRepository):
    """Payments live in the ``transactions`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Payment]:
        return fetch_list(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM transactions ORDER BY created_at DESC, id DESC",
            (),
            row_to_payment,
            what="payments",
        )

    def list_for_customer(self, customer_id: int) -> Sequence[Payment]:
        return fetch_list(
            self._conn_factory,
            f"""
            SELECT {_COLUMNS} FROM transactions
            WHERE customer_id=%s
            ORDER BY created_at DESC, id DESC
            """,
            (customer_id,),
            row_to_payment,
            what="payments",
        )

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM transactions WHERE id=%s", (payment_id,))
            row = fetchone(cur)
            return row_to_payment(row) if row else None

    def create(self, *, customer_id: int, amount: Decimal, payment_mode: str, notes: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO transactions(customer_id, amount, payment_mode, notes)
                VALUES(%s,%s,%s,%s)
                """,
                (customer_id, amount, payment_mode, notes),
            )
            return int(cur.lastrowid)

    def update(self, *, payment_id: int, amount: Decimal, payment_mode: str, notes: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE transactions SET amount=%s, payment_mode=%s, notes=%s WHERE id=%s",
                (amount, payment_mode, notes, payment_id),
            )
            return cur.rowcount > 0

    def delete(self, payment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM transactions WHERE id=%s", (payment_id,))
            return cur.rowcount > 0
