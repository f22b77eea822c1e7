from __future__ import annotations

import logging

from rich.console import Console

from billed.cli.bills_menu import bills_menu
from billed.cli.login_menu import login_menu
from billed.cli.new_bill_menu import new_bill_menu
from billed.constants import ROUTES_PATH
from billed.services.bills_service import BillsService
from billed.services.new_bill_service import NewBillService
from billed.session import JsonFileSession
from billed.store.base import Store

logger = logging.getLogger(__name__)

console = Console()


class Router:
    """Keeps the current page path; pages move between each other through ``navigate``."""

    def __init__(self, store: Store | None, session: JsonFileSession) -> None:
        self.store = store
        self.session = session
        self.path = ROUTES_PATH["Bills"] if session.current_user() else ROUTES_PATH["Login"]

    def navigate(self, path: str) -> None:
        logger.debug("navigate %s -> %s", self.path, path)
        self.path = path

    def step(self) -> bool:
        """Render the current page once. Returns False when the user quits."""
        if self.path == ROUTES_PATH["Bills"]:
            return bills_menu(BillsService(self.store, self.navigate, self.session), self.session)
        if self.path == ROUTES_PATH["NewBill"]:
            new_bill_menu(NewBillService(self.store, self.navigate, self.session))
            return True
        if self.path != ROUTES_PATH["Login"]:
            logger.warning("Unknown path %s, back to login", self.path)
        return login_menu(self.session, self.navigate)

    def run(self) -> None:
        while self.step():
            pass
        console.print("[bold]À bientôt ![/bold]")
