from abc import ABC, abstractmethod

from billed.models.bill import Bill


class BillRepository(ABC):
    @abstractmethod
    def get_by_id(self, bill_id: str) -> Bill | None: ...

    @abstractmethod
    def list_all(self) -> list[Bill]: ...

    @abstractmethod
    def upsert(self, bill: Bill) -> Bill: ...
