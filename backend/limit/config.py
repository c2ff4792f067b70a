from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Reference data overrides (JSON files). Empty = built-in GDCR 2017 tables.
    rule_table_path: str = ""
    norms_catalog_path: str = ""

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    log_level: str = "INFO"

    # Bulk CSV analysis
    bulk_max_rows: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
