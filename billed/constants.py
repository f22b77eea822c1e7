from collections.abc import Callable

from billed.models.bill import BillStatus, BillType

MONTHS_FR = {
    1: "Jan",
    2: "Fév",
    3: "Mar",
    4: "Avr",
    5: "Mai",
    6: "Jui",
    7: "Jui",
    8: "Aoû",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Déc",
}

STATUS_LABELS = {
    BillStatus.PENDING.value: "En attente",
    BillStatus.ACCEPTED.value: "Accepté",
    BillStatus.REFUSED.value: "Refusé",
}

TYPE_CHOICES = [t.value for t in BillType]

ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
}

Navigate = Callable[[str], None]
