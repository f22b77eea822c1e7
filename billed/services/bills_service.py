from __future__ import annotations

import logging

from billed.constants import ROUTES_PATH, Navigate
from billed.exceptions import FormatError, StoreError
from billed.format import format_status, parse_date, try_format_date
from billed.models.bill import Bill, DisplayBill
from billed.models.page import BillsPage, BillsPageState, ErrorPage, LoadingPage
from billed.session import SessionReader
from billed.store.base import Store

logger = logging.getLogger(__name__)


def _newest_first_key(bill: Bill) -> tuple[int, int]:
    """Parsable dates first, newest to oldest; the rest keep their relative order."""
    try:
        return 0, -parse_date(bill.date).toordinal()
    except FormatError:
        return 1, 0


def to_display_bill(bill: Bill) -> DisplayBill:
    result = try_format_date(bill.date)
    if not result.is_ok:
        logger.warning("Keeping raw date %r for bill %s: %s", bill.date, bill.id, result.error)
    data = bill.model_dump()
    data.update(
        date=result.unwrap_or(bill.date),
        status=format_status(bill.status),
        raw_date=bill.date,
        date_formatted=result.is_ok,
    )
    return DisplayBill.model_validate(data)


class BillsService:
    def __init__(self, store: Store | None, navigate: Navigate, session: SessionReader) -> None:
        self.store = store
        self.navigate = navigate
        self.session = session

    async def get_bills(self) -> list[DisplayBill] | None:
        """Fetch the bills, newest first, with display dates and statuses.

        Returns ``None`` when no store is configured. ``StoreError`` from the
        store propagates. A bill whose date cannot be formatted keeps its raw
        date instead of being dropped.
        """
        if self.store is None:
            logger.debug("get_bills called without a store")
            return None
        bills = await self.store.bills().list()
        ordered = sorted(bills, key=_newest_first_key)
        result = [to_display_bill(bill) for bill in ordered]
        logger.debug("Retrieved %d bills", len(result))
        return result

    async def load_page(self) -> BillsPageState:
        try:
            bills = await self.get_bills()
        except StoreError as exc:
            logger.error("Failed to load bills: %s", exc)
            return ErrorPage(message=str(exc))
        if bills is None:
            return LoadingPage()
        return BillsPage(bills=bills)

    def handle_click_new_bill(self) -> None:
        self.navigate(ROUTES_PATH["NewBill"])

    @staticmethod
    def receipt_url(bill: Bill) -> str | None:
        if not bill.has_receipt:
            return None
        return bill.file_url
