from __future__ import annotations

from pydantic import BaseModel

from billed.models.bill import DisplayBill


class LoadingPage(BaseModel):
    """No data source is wired yet."""


class ErrorPage(BaseModel):
    message: str


class BillsPage(BaseModel):
    bills: list[DisplayBill] = []


BillsPageState = LoadingPage | ErrorPage | BillsPage
