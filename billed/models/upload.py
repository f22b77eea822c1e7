from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from billed.models.bill import Bill, BillType


class ReceiptFile(BaseModel):
    name: str
    content: bytes = b""
    content_type: str = ""

    @classmethod
    def from_path(cls, path: str | Path) -> ReceiptFile:
        p = Path(path)
        return cls(name=p.name, content=p.read_bytes(), content_type=CONTENT_TYPES.get(p.suffix.lower(), ""))


CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}


class PendingUpload(BaseModel):
    """Receipt attached to the bill being edited. Never persisted."""

    file: ReceiptFile | None = None
    file_error: bool = False
    bill_id: str | None = None
    file_url: str | None = None
    file_name: str | None = None

    @property
    def uploaded(self) -> bool:
        return self.file_url is not None and self.file_name is not None

    def attach(self, bill_id: str | None, file_url: str, file_name: str) -> None:
        self.bill_id = bill_id
        self.file_url = file_url
        self.file_name = file_name
        self.file_error = False

    def reject(self) -> None:
        self.file = None
        self.file_error = True
        self.clear_upload()

    def clear_upload(self) -> None:
        self.bill_id = None
        self.file_url = None
        self.file_name = None


class NewBillForm(BaseModel):
    """Values typed into the new-bill form by the presentation layer."""

    type: BillType
    name: str
    date: str
    amount: int = Field(ge=0)
    vat: int | float | str | None = None
    pct: int | None = Field(default=None, ge=0, le=100)
    commentary: str = ""


class UploadPayload(BaseModel):
    file: ReceiptFile
    email: str = ""


class UploadResult(BaseModel):
    file_url: str
    key: str
    file_name: str | None = None


class UpdatePayload(BaseModel):
    id: str | None = None
    data: Bill
    selector: str | None = None
