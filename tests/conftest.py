"""Root conftest: sample bills, an in-memory fake store and SQLite fixtures."""

from __future__ import annotations

import pytest
from sqlalchemy import Connection, create_engine
from sqlalchemy.engine import Engine

from billed.db import create_schema
from billed.exceptions import StoreError
from billed.models.bill import Bill
from billed.models.upload import UpdatePayload, UploadPayload, UploadResult
from billed.store.base import BillsResource, Store

RAW_BILLS = [
    {
        "id": "47qAXb6fIm2zOKkLzMro",
        "vat": "80",
        "fileUrl": "https://test.storage.tld/preview-facture-free-201801-pdf-1.jpg",
        "status": "pending",
        "type": "Hôtel et logement",
        "commentary": "séminaire billed",
        "name": "encore",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2004-04-04",
        "amount": 400,
        "commentAdmin": "ok",
        "email": "a@a",
        "pct": 20,
    },
    {
        "id": "BeKy5Mo4jkmdfPGYpTxZ",
        "vat": "",
        "amount": 100,
        "name": "test1",
        "fileName": "1592770761.jpeg",
        "commentary": "plop",
        "pct": 20,
        "type": "Transports",
        "email": "a@a",
        "fileUrl": "https://test.storage.tld/1592770761.jpeg",
        "date": "2001-01-01",
        "status": "refused",
        "commentAdmin": "en fait non",
    },
    {
        "id": "UIUZtnPQvnbFnB0ozvJh",
        "name": "test3",
        "email": "a@a",
        "type": "Services en ligne",
        "vat": "60",
        "pct": 20,
        "commentAdmin": "bon bah d'accord",
        "amount": 300,
        "status": "accepted",
        "date": "2003-03-03",
        "commentary": "",
        "fileName": "facture-client-php-exemple-format-pdf.jpg",
        "fileUrl": "https://test.storage.tld/facture-client-php-exemple-format-pdf.jpg",
    },
    {
        "id": "qcCK3SzECmaZAGRrHjaC",
        "status": "refused",
        "pct": 20,
        "amount": 200,
        "email": "a@a",
        "name": "test2",
        "vat": "40",
        "fileName": "preview-facture-free-201801-pdf-1.jpg",
        "date": "2002-02-02",
        "commentAdmin": "pas la bonne facture",
        "commentary": "test2",
        "type": "Restaurants et bars",
        "fileUrl": "https://test.storage.tld/preview-facture-free-201801-pdf-1.jpg",
    },
]


def _sample_bills() -> list[Bill]:
    return [Bill.model_validate(raw) for raw in RAW_BILLS]


def _bill(bill_id: str, raw_date: str, **overrides) -> Bill:
    defaults = dict(id=bill_id, type="Transports", name=f"bill {bill_id}", amount=10, date=raw_date)
    defaults.update(overrides)
    return Bill(**defaults)


class FakeBillsResource(BillsResource):
    """In-memory bills resource recording every call it receives."""

    def __init__(self, bills: list[Bill] | None = None) -> None:
        self.bills = list(bills or [])
        self.list_error: StoreError | None = None
        self.create_error: StoreError | None = None
        self.update_error: StoreError | None = None
        self.upload_result = UploadResult(file_url="https://localhost:3456/images/test.jpg", key="1234")
        self.created: list[UploadPayload] = []
        self.updated: list[UpdatePayload] = []

    async def list(self) -> list[Bill]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.bills)

    async def create(self, payload: UploadPayload) -> UploadResult:
        self.created.append(payload)
        if self.create_error is not None:
            raise self.create_error
        return self.upload_result

    async def update(self, payload: UpdatePayload) -> Bill:
        self.updated.append(payload)
        if self.update_error is not None:
            raise self.update_error
        saved = payload.data.model_copy(update={"id": payload.selector or "new-id"})
        self.bills.append(saved)
        return saved


class FakeStore(Store):
    def __init__(self, bills: list[Bill] | None = None) -> None:
        self.resource = FakeBillsResource(bills)

    def bills(self) -> BillsResource:
        return self.resource


@pytest.fixture()
def sample_bills():
    return _sample_bills


@pytest.fixture()
def fake_store() -> FakeStore:
    return FakeStore(_sample_bills())


@pytest.fixture()
def db_engine() -> Engine:
    return create_engine("sqlite:///:memory:")


@pytest.fixture()
def db_connection(db_engine: Engine) -> Connection:
    conn = db_engine.connect()
    create_schema(conn)
    yield conn
    conn.close()
