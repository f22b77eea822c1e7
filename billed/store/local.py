from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ulid import ULID

from billed.exceptions import StoreError
from billed.models.bill import Bill, BillStatus
from billed.models.upload import UpdatePayload, UploadPayload, UploadResult
from billed.repositories.base import BillRepository
from billed.settings import settings
from billed.storage.base import StorageBackend
from billed.store.base import BillsResource, Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _receipt_storage_key(bill_id: str, filename: str) -> str:
    prefix = settings.storage_prefix
    if prefix:
        return f"{prefix}/{bill_id}/{filename}"
    return f"{bill_id}/{filename}"


class LocalBillsResource(BillsResource):
    """Bills kept in a SQL database, receipts in a storage backend.

    ``create`` only stores the receipt and hands back a fresh bill id; the
    row itself is written by ``update``, so an abandoned form leaves no bill
    behind.
    """

    def __init__(self, bill_repo: BillRepository, storage: StorageBackend) -> None:
        self.bill_repo = bill_repo
        self.storage = storage

    @staticmethod
    def _call(operation: str, func: Callable[..., T], *args: object) -> T:
        try:
            return func(*args)
        except Exception as exc:
            logger.exception("Store operation %s failed", operation)
            raise StoreError("Erreur 500", status=500) from exc

    async def list(self) -> list[Bill]:
        bills = self._call("list", self.bill_repo.list_all)
        logger.debug("Listed %d bills", len(bills))
        return bills

    async def create(self, payload: UploadPayload) -> UploadResult:
        bill_id = str(ULID())
        key = _receipt_storage_key(bill_id, payload.file.name)
        self._call("create", self.storage.save, key, payload.file.content, payload.file.content_type)
        url = self._call("create", self.storage.url_for, key)
        logger.info("Receipt %s stored for %s (bill=%s)", payload.file.name, payload.email or "<anonymous>", bill_id)
        return UploadResult(file_url=url, key=bill_id, file_name=payload.file.name)

    async def update(self, payload: UpdatePayload) -> Bill:
        bill_id = payload.selector or payload.id
        existing = self._call("update", self.bill_repo.get_by_id, bill_id) if bill_id else None
        # The store owns the status: new bills always start pending.
        status = existing.status if existing is not None else BillStatus.PENDING.value
        data = payload.data.model_copy(update={"id": bill_id, "status": status})
        bill = self._call("update", self.bill_repo.upsert, data)
        logger.info("Bill %s saved (status=%s)", bill.id, bill.status)
        return bill


class LocalStore(Store):
    def __init__(self, bill_repo: BillRepository, storage: StorageBackend) -> None:
        self._bills = LocalBillsResource(bill_repo, storage)

    def bills(self) -> BillsResource:
        return self._bills
