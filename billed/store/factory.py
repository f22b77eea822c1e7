import logging

from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


def get_store() -> Store | None:
    """Build the configured store, or ``None`` when no data source is wired."""
    backend = settings.store_backend

    if backend == "none":
        logger.info("No store configured")
        return None

    if backend == "local":
        from billed.repositories.factory import get_bill_repository
        from billed.storage.factory import get_storage
        from billed.store.local import LocalStore

        logger.info("Using store backend: local db=%s", settings.db_url)
        return LocalStore(get_bill_repository(), get_storage())

    raise ValueError(f"Unsupported store backend: {backend}")
