from __future__ import annotations

import logging
from enum import Enum

from billed.constants import ROUTES_PATH, Navigate
from billed.exceptions import FlowStateError, StoreError, UploadInProgressError, ValidationError
from billed.models.bill import Bill, BillStatus
from billed.models.upload import NewBillForm, PendingUpload, ReceiptFile, UpdatePayload, UploadPayload
from billed.services.file_validator import FileValidation, validate_receipt_filename
from billed.session import SessionReader, session_email
from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


class NewBillState(str, Enum):
    EDITING = "editing"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class NewBillService:
    """Drives one new-bill form: receipt upload first, then bill submission.

    One instance per form. The store is optional; without one the receipt is
    still validated and submission only navigates back to the bill list.
    """

    def __init__(self, store: Store | None, navigate: Navigate, session: SessionReader) -> None:
        self.store = store
        self.navigate = navigate
        self.session = session
        self.state = NewBillState.EDITING
        self.pending = PendingUpload()
        self.validation_error: ValidationError | None = None
        self._upload_count = 0
        self._upload_token: int | None = None

    @property
    def file_error(self) -> bool:
        return self.pending.file_error

    async def handle_change_file(self, file: ReceiptFile) -> FileValidation:
        if self.state == NewBillState.UPLOADING:
            raise UploadInProgressError(f"Upload still running, cannot attach {file.name!r}")
        if self.state in (NewBillState.SUBMITTING, NewBillState.SUBMITTED):
            raise FlowStateError(f"Cannot attach a receipt while {self.state.value}")

        validation = validate_receipt_filename(file.name)
        if validation == FileValidation.INVALID:
            self.pending.reject()
            self.validation_error = ValidationError(file.name)
            logger.info("Receipt %r rejected", file.name)
            return validation

        self.validation_error = None
        self.pending.file = file
        self.pending.file_error = False
        if self.store is None:
            return validation

        self._upload_count += 1
        token = self._upload_count
        self._upload_token = token
        self.state = NewBillState.UPLOADING
        try:
            result = await self.store.bills().create(
                UploadPayload(file=file, email=session_email(self.session)),
            )
        except StoreError as exc:
            logger.error("Receipt upload failed for %s: %s", file.name, exc)
            if token == self._upload_token:
                self.pending.file = None
                self.pending.clear_upload()
            return validation
        finally:
            current = token == self._upload_token
            if current:
                self._upload_token = None
                if self.state == NewBillState.UPLOADING:
                    self.state = NewBillState.EDITING

        if not current:
            logger.debug("Discarding superseded upload of %s", file.name)
            return validation
        self.pending.attach(result.key, result.file_url, result.file_name or file.name)
        logger.debug("Receipt %s uploaded as %s", self.pending.file_name, self.pending.file_url)
        return validation

    def build_bill(self, form: NewBillForm) -> Bill:
        return Bill(
            email=session_email(self.session),
            type=form.type.value,
            name=form.name,
            amount=form.amount,
            date=form.date,
            vat=form.vat,
            pct=form.pct if form.pct is not None else settings.default_pct,
            commentary=form.commentary,
            file_url=self.pending.file_url,
            file_name=self.pending.file_name,
            status=BillStatus.PENDING.value,
        )

    async def handle_submit(self, form: NewBillForm) -> Bill | None:
        """Send the bill and go back to the list.

        A store failure propagates and leaves the form and receipt in place so
        the user can submit again. A missing receipt is left for the store to
        reject.
        """
        if self.state in (NewBillState.SUBMITTING, NewBillState.SUBMITTED):
            raise FlowStateError(f"Cannot submit while {self.state.value}")

        bill = self.build_bill(form)
        if self.store is None:
            self.state = NewBillState.SUBMITTED
            self.navigate(ROUTES_PATH["Bills"])
            return None

        self.state = NewBillState.SUBMITTING
        payload = UpdatePayload(id=self.pending.bill_id, data=bill, selector=self.pending.bill_id)
        try:
            saved = await self.store.bills().update(payload)
        except Exception:
            # An upload may still be running behind a failed submit.
            self.state = NewBillState.UPLOADING if self._upload_token is not None else NewBillState.EDITING
            raise
        self.state = NewBillState.SUBMITTED
        logger.info("Bill submitted: id=%s, name=%s, amount=%d", saved.id, saved.name, saved.amount)
        self.navigate(ROUTES_PATH["Bills"])
        return saved
