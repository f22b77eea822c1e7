from __future__ import annotations


class BilledError(Exception):
    """Base class for every error raised by the billed package."""


class ValidationError(BilledError):
    """A receipt file was rejected by the extension check."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Unsupported receipt file: {filename!r}")


class FormatError(BilledError, ValueError):
    """A raw value could not be turned into a display string."""

    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(f"Cannot format date: {raw!r}")


class StoreError(BilledError):
    """Failure reported by the bill store.

    ``str(error)`` is the backend message, unchanged, so it can be shown
    as-is on the error page (e.g. ``"Erreur 404"``).
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        self.message = message
        self.status = status
        super().__init__(message)


class FlowStateError(BilledError):
    """An event arrived in a state that does not accept it."""


class UploadInProgressError(FlowStateError):
    """A new receipt was selected while the previous upload is still running."""
