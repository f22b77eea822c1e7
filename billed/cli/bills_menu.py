from __future__ import annotations

import asyncio

import questionary
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from billed.constants import ROUTES_PATH
from billed.format import format_amount
from billed.models.page import BillsPage, BillsPageState, ErrorPage
from billed.services.bills_service import BillsService
from billed.session import JsonFileSession

console = Console()

NEW_BILL = "Nouvelle note de frais"
VIEW_RECEIPT = "Voir un justificatif"
LOGOUT = "Se déconnecter"
QUIT = "Quitter"


def render_bills_page(state: BillsPageState) -> None:
    console.print()
    console.print("[bold]Mes notes de frais[/bold]", style="cyan")

    if isinstance(state, ErrorPage):
        console.print(Panel(state.message, title="Erreur", style="red"))
        return
    if not isinstance(state, BillsPage):
        console.print("[dim]Chargement...[/dim]")
        return
    if not state.bills:
        console.print("[yellow]Aucune note de frais.[/yellow]")
        return

    table = Table()
    table.add_column("Type")
    table.add_column("Nom")
    table.add_column("Date")
    table.add_column("Montant", justify="right")
    table.add_column("Statut", justify="center")
    for bill in state.bills:
        table.add_row(bill.type, bill.name, bill.date, format_amount(bill.amount), bill.status)
    console.print(table)


def _show_receipt(state: BillsPage, bills_service: BillsService) -> None:
    with_receipt = [b for b in state.bills if bills_service.receipt_url(b)]
    if not with_receipt:
        console.print("[yellow]Aucun justificatif disponible.[/yellow]")
        return
    choices = [f"{b.name} ({b.date})" for b in with_receipt]
    choice = questionary.select("Justificatif :", choices=[*choices, "Retour"]).ask()
    if choice is None or choice == "Retour":
        return
    bill = with_receipt[choices.index(choice)]
    console.print(f"  {bill.file_name}: {bills_service.receipt_url(bill)}")


def bills_menu(bills_service: BillsService, session: JsonFileSession) -> bool:
    """Show the bill list and handle one action. Returns False to leave the app."""
    state = asyncio.run(bills_service.load_page())
    render_bills_page(state)

    choices = [NEW_BILL]
    if isinstance(state, BillsPage) and state.bills:
        choices.append(VIEW_RECEIPT)
    choices += [LOGOUT, QUIT]

    choice = questionary.select("Action", choices=choices).ask()
    if choice is None or choice == QUIT:
        return False
    if choice == NEW_BILL:
        bills_service.handle_click_new_bill()
    elif choice == VIEW_RECEIPT and isinstance(state, BillsPage):
        _show_receipt(state, bills_service)
    elif choice == LOGOUT:
        session.logout()
        bills_service.navigate(ROUTES_PATH["Login"])
    return True
