from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BillType(str, Enum):
    TRANSPORTS = "Transports"
    RESTAURANTS = "Restaurants et bars"
    LODGING = "Hôtel et logement"
    ONLINE_SERVICES = "Services en ligne"
    IT = "IT et électronique"
    EQUIPMENT = "Equipement et matériel"
    OFFICE_SUPPLIES = "Fournitures de bureau"


class BillStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class Bill(BaseModel):
    """One expense-report line as exchanged with the store.

    ``type``, ``date`` and ``status`` stay plain strings: records coming back
    from the store are not trusted to be well formed, and a single bad one
    must not make the whole list unreadable.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    email: str = ""
    type: str
    name: str
    amount: int = 0
    date: str
    vat: int | float | str | None = None
    pct: int = 20
    commentary: str = ""
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    status: str = BillStatus.PENDING.value
    comment_admin: str = Field(default="", alias="commentAdmin")

    @property
    def has_receipt(self) -> bool:
        return bool(self.file_url) and bool(self.file_name)


class DisplayBill(Bill):
    """A bill whose ``date``/``status`` hold display strings.

    ``raw_date`` keeps the value the store returned so ordering never depends
    on the display text.
    """

    raw_date: str
    date_formatted: bool = True
