import questionary
from rich.console import Console

from billed.constants import ROUTES_PATH, Navigate
from billed.models.user import User, UserType
from billed.session import JsonFileSession

console = Console()


def login_menu(session: JsonFileSession, navigate: Navigate) -> bool:
    """Ask for the employee e-mail and open a session. Returns False when the user aborts."""
    console.print()
    console.print("[bold]Billed : espace employé[/bold]", style="cyan")

    email = questionary.text("Adresse e-mail :").ask()
    if email is None:
        return False

    session.login(User(type=UserType.EMPLOYEE, email=email.strip()))
    navigate(ROUTES_PATH["Bills"])
    return True
