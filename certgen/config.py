"""
certgen configuration, loaded from the environment (CERTGEN_*) or .env.

Scoring weights and thresholds are fixed in rules.py and are not settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CERTGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    input_path: Path = Field(default=Path("Data") / "Data.csv")
    output_dir: Path = Field(default=Path("Output"))
    template_path: Optional[Path] = Field(default=None, description="DOCX letter template")
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
