from __future__ import annotations

from abc import ABC, abstractmethod

from billed.models.bill import Bill
from billed.models.upload import UpdatePayload, UploadPayload, UploadResult


class BillsResource(ABC):
    """Bill operations offered by a store. Every method raises ``StoreError`` on failure."""

    @abstractmethod
    async def list(self) -> list[Bill]: ...

    @abstractmethod
    async def create(self, payload: UploadPayload) -> UploadResult:
        """Upload the receipt and reserve the bill it belongs to."""
        ...

    @abstractmethod
    async def update(self, payload: UpdatePayload) -> Bill:
        """Create or replace the bill identified by ``payload.selector``."""
        ...


class Store(ABC):
    @abstractmethod
    def bills(self) -> BillsResource: ...
