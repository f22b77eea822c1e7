from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from billed.models.user import User

logger = logging.getLogger(__name__)


class SessionReader(ABC):
    @abstractmethod
    def current_user(self) -> User | None: ...


class StaticSession(SessionReader):
    def __init__(self, user: User | None = None) -> None:
        self.user = user

    def current_user(self) -> User | None:
        return self.user


class JsonFileSession(SessionReader):
    """Logged-in user persisted as JSON on disk, one user per session file."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def current_user(self) -> User | None:
        if not self.path.exists():
            return None
        try:
            return User.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return None

    def login(self, user: User) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(user.model_dump_json(), encoding="utf-8")
        logger.info("Session opened for %s", user.email or "<no email>")

    def logout(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.info("Session closed")


def session_email(session: SessionReader) -> str:
    user = session.current_user()
    if user is None:
        return ""
    return user.email
