import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    store_backend: str = "local"
    db_url: str = "sqlite:///./billed.db"

    storage_backend: str = "local"
    storage_local_path: str = "./receipts"
    storage_prefix: str = "justificatifs"

    allowed_receipt_extensions: list[str] = ["jpg", "jpeg", "png"]
    default_pct: int = 20

    session_path: str = "./.billed-session.json"

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
