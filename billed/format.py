from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from billed.constants import MONTHS_FR, STATUS_LABELS
from billed.exceptions import FormatError
from billed.models.bill import BillStatus


@dataclass(frozen=True)
class FormatResult:
    """Outcome of a formatting attempt: either ``value`` or ``error`` is set."""

    value: str | None = None
    error: FormatError | None = None

    @classmethod
    def ok(cls, value: str) -> FormatResult:
        return cls(value=value)

    @classmethod
    def err(cls, error: FormatError) -> FormatResult:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: str) -> str:
        if self.error is not None or self.value is None:
            return default
        return self.value


def parse_date(raw: object) -> date:
    """Parse a raw bill date (``YYYY-MM-DD`` or a full ISO timestamp)."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise FormatError(raw)
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise FormatError(raw) from exc


def format_date(raw: object) -> str:
    """Format a raw date for display: '2004-04-04' -> '4 Avr. 04'.

    Only raw store values are valid input; feeding the output back in raises
    ``FormatError``.
    """
    d = parse_date(raw)
    return f"{d.day} {MONTHS_FR[d.month]}. {d.year % 100:02d}"


def try_format_date(raw: object) -> FormatResult:
    try:
        return FormatResult.ok(format_date(raw))
    except FormatError as exc:
        return FormatResult.err(exc)


def format_status(raw: str) -> str:
    """Map a lifecycle tag to its label. Unknown tags are returned unchanged."""
    if isinstance(raw, BillStatus):
        raw = raw.value
    return STATUS_LABELS.get(raw, raw)


def format_amount(amount: int) -> str:
    return f"{amount} €"
