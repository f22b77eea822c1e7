from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Connection, text
from sqlalchemy.engine import RowMapping
from ulid import ULID

from billed.models.bill import Bill
from billed.repositories.base import BillRepository


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SQLAlchemyBillRepository(BillRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    @staticmethod
    def _row_to_bill(row: RowMapping) -> Bill:
        return Bill(
            id=row["id"],
            email=row["email"],
            type=row["type"],
            name=row["name"],
            amount=row["amount"],
            date=row["date"],
            vat=row["vat"],
            pct=row["pct"],
            commentary=row["commentary"],
            file_url=row["file_url"],
            file_name=row["file_name"],
            status=row["status"],
            comment_admin=row["comment_admin"],
        )

    def get_by_id(self, bill_id: str) -> Bill | None:
        row = (
            self.conn.execute(
                text("SELECT * FROM bills WHERE id = :id"),
                {"id": bill_id},
            )
            .mappings()
            .fetchone()
        )
        if row is None:
            return None
        return self._row_to_bill(row)

    def list_all(self) -> list[Bill]:
        rows = self.conn.execute(text("SELECT * FROM bills ORDER BY created_at")).mappings().fetchall()
        return [self._row_to_bill(row) for row in rows]

    def upsert(self, bill: Bill) -> Bill:
        bill_id = bill.id or str(ULID())
        now = _now()
        params = {
            "id": bill_id,
            "email": bill.email,
            "type": bill.type,
            "name": bill.name,
            "amount": bill.amount,
            "date": bill.date,
            "vat": None if bill.vat is None else str(bill.vat),
            "pct": bill.pct,
            "commentary": bill.commentary,
            "file_url": bill.file_url,
            "file_name": bill.file_name,
            "status": bill.status,
            "comment_admin": bill.comment_admin,
            "now": now,
        }
        if self.get_by_id(bill_id) is None:
            self.conn.execute(
                text(
                    "INSERT INTO bills (id, email, type, name, amount, date, vat, pct, commentary, "
                    "file_url, file_name, status, comment_admin, created_at, updated_at) "
                    "VALUES (:id, :email, :type, :name, :amount, :date, :vat, :pct, :commentary, "
                    ":file_url, :file_name, :status, :comment_admin, :now, :now)"
                ),
                params,
            )
        else:
            self.conn.execute(
                text(
                    "UPDATE bills SET email = :email, type = :type, name = :name, amount = :amount, "
                    "date = :date, vat = :vat, pct = :pct, commentary = :commentary, "
                    "file_url = :file_url, file_name = :file_name, status = :status, "
                    "comment_admin = :comment_admin, updated_at = :now WHERE id = :id"
                ),
                params,
            )
        self.conn.commit()
        result = self.get_by_id(bill_id)
        if result is None:
            raise RuntimeError(f"Failed to retrieve bill after upsert (id={bill_id})")
        return result
