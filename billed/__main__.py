from billed.cli.app import Router
from billed.db import initialize_db
from billed.logging import configure_logging
from billed.session import JsonFileSession
from billed.settings import settings
from billed.store.factory import get_store


def main() -> None:
    configure_logging()
    store = get_store()
    if store is not None:
        initialize_db()
    Router(store, JsonFileSession(settings.session_path)).run()


if __name__ == "__main__":
    main()
