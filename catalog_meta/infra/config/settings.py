from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parents[3]

# Variables from <root>/.env are loaded once; real environment wins
# (override=False by default).
load_dotenv(BASE_DIR / ".env")

DEFAULT_DATE_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'"


class Settings:
    def __init__(self) -> None:
        self.env: str = os.getenv("ENV", "dev").lower()
        self.is_prod: bool = self.env in {"prod", "production"}
        self.is_dev: bool = not self.is_prod

        # Assets layout:
        # /assets/
        #   /list_providers/   # *.json list provider definitions
        self.assets_root: Path = BASE_DIR / "assets"
        self.list_providers_root: Path = Path(
            os.getenv("LIST_PROVIDERS_DIR") or self.assets_root / "list_providers"
        )

        # Pattern given to DATE / START_DATE fields whose template has none.
        self.default_date_pattern: str = (
            os.getenv("METADATA_DATE_PATTERN") or DEFAULT_DATE_PATTERN
        )

        # Locale used when list providers translate option labels.
        self.locale: str = os.getenv("METADATA_LOCALE", "en").lower()

        try:
            self.log_value_max_length: int = int(os.getenv("LOG_VALUE_MAX_LENGTH", "200"))
        except ValueError:
            self.log_value_max_length = 200
        if self.log_value_max_length <= 0:
            self.log_value_max_length = 200


settings = Settings()
