from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Where receipt files end up once a bill's receipt is uploaded."""

    @abstractmethod
    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> None:
        """Write ``data`` under ``key``, replacing any previous receipt."""
        ...

    @abstractmethod
    def url_for(self, key: str) -> str:
        """URL a stored receipt can be opened from."""
        ...
