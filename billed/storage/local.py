import logging
from pathlib import Path

from billed.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    """Receipts written under a directory and served as ``file://`` URLs."""

    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # Keys embed the uploaded file name.
        path = (self.base_dir / key).resolve()
        if not path.is_relative_to(self.base_dir):
            raise ValueError(f"Receipt key escapes storage directory: {key!r}")
        return path

    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Stored receipt %s (%s, %d bytes)", key, content_type, len(data))

    def url_for(self, key: str) -> str:
        return self._path(key).as_uri()
