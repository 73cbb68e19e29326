"""Runtime configuration, read from ``ORDERSVC_*`` environment variables.

A ``.env`` file in the working directory is honoured as well.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    data_dir: Path = _PROJECT_ROOT / "data"
    # empty means "use the local catalog as the inventory"
    inventory_url: str = ""
    inventory_timeout: float = 5.0
    inventory_token: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ORDERSVC_", env_file=".env", extra="ignore"
    )
