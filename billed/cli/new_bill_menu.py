from __future__ import annotations

import asyncio
from datetime import date

import questionary
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from billed.constants import ROUTES_PATH, TYPE_CHOICES
from billed.exceptions import StoreError
from billed.format import parse_date
from billed.models.bill import BillType
from billed.models.upload import NewBillForm, ReceiptFile
from billed.services.file_validator import FileValidation
from billed.services.new_bill_service import NewBillService

console = Console()


def _ask_int(
    message: str, *, default: str = "", minimum: int = 0, maximum: int | None = None, required: bool = True
) -> int | None:
    while True:
        val = questionary.text(message, default=default).ask()
        if val is None:
            return None
        if not val.strip() and not required:
            return None
        try:
            parsed = int(val)
        except ValueError:
            parsed = -1
        if parsed >= minimum and (maximum is None or parsed <= maximum):
            return parsed
        console.print("[red]Valeur invalide. Réessayez.[/red]")


def _ask_date() -> str | None:
    while True:
        val = questionary.text("Date (AAAA-MM-JJ) :", default=date.today().isoformat()).ask()
        if val is None:
            return None
        try:
            parse_date(val)
            return val.strip()
        except ValueError:
            console.print("[red]Date invalide. Utilisez AAAA-MM-JJ.[/red]")


def _ask_receipt(new_bill_service: NewBillService) -> bool:
    """Prompt until a receipt with an accepted extension is attached. False when aborted."""
    while True:
        path = questionary.path("Justificatif (jpg, jpeg ou png) :").ask()
        if path is None:
            return False
        try:
            receipt = ReceiptFile.from_path(path)
        except OSError as exc:
            console.print(f"[red]Fichier illisible: {exc}[/red]")
            continue

        validation = asyncio.run(new_bill_service.handle_change_file(receipt))
        if validation == FileValidation.INVALID:
            console.print("[red]Seuls les fichiers jpg, jpeg et png sont acceptés.[/red]")
            continue
        if new_bill_service.store is not None and not new_bill_service.pending.uploaded:
            console.print("[red]L'envoi du justificatif a échoué. Choisissez à nouveau le fichier.[/red]")
            continue
        return True


def new_bill_menu(new_bill_service: NewBillService) -> None:
    console.print()
    console.print("[bold]Envoyer une note de frais[/bold]", style="cyan")

    bill_type = questionary.select("Type de dépense :", choices=TYPE_CHOICES).ask()
    name = questionary.text("Nom de la dépense :").ask()
    bill_date = _ask_date()
    amount = _ask_int("Montant TTC :")
    vat = questionary.text("TVA (optionnel) :").ask()
    pct = _ask_int("Pourcentage de TVA :", default="20", maximum=100, required=False)
    commentary = questionary.text("Commentaire (optionnel) :").ask()

    if bill_type is None or name is None or bill_date is None or amount is None:
        new_bill_service.navigate(ROUTES_PATH["Bills"])
        return

    if not _ask_receipt(new_bill_service):
        new_bill_service.navigate(ROUTES_PATH["Bills"])
        return

    try:
        form = NewBillForm(
            type=BillType(bill_type),
            name=name,
            date=bill_date,
            amount=amount,
            vat=vat or None,
            pct=pct,
            commentary=commentary or "",
        )
    except PydanticValidationError as exc:
        console.print(f"[red]Formulaire invalide: {exc.error_count()} erreur(s).[/red]")
        return

    while True:
        try:
            asyncio.run(new_bill_service.handle_submit(form))
        except StoreError as exc:
            console.print(f"[red]Envoi impossible: {exc}[/red]")
            if questionary.confirm("Réessayer ?", default=True).ask():
                continue
            new_bill_service.navigate(ROUTES_PATH["Bills"])
            return
        console.print("[green bold]Note de frais envoyée ![/green bold]")
        return
