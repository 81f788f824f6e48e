from pathlib import Path

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    # Catalog
    catalog_path: Path = DATA_DIR / "duas.json"

    # Page
    page_title: str = "40 Doa Pilihan"
    all_label: str = "Semua"

    # Clipboard (disable on hosts where the browser blocks it)
    clipboard_enabled: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "DOA_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
