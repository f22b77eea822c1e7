from unittest.mock import patch

import pytest

from billed.storage.local import LocalStorage


class TestStorageFactory:
    @patch("billed.storage.factory.settings")
    def test_local_storage(self, mock_settings, tmp_path):
        mock_settings.storage_backend = "local"
        mock_settings.storage_local_path = str(tmp_path)

        from billed.storage.factory import get_storage

        storage = get_storage()
        assert isinstance(storage, LocalStorage)

    @patch("billed.storage.factory.settings")
    def test_unsupported_backend(self, mock_settings):
        mock_settings.storage_backend = "ftp"

        from billed.storage.factory import get_storage

        with pytest.raises(ValueError, match="Unsupported storage backend"):
            get_storage()
