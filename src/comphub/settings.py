"""Runtime settings resolved from environment variables.

    COMPHUB_DATA_DIR: directory holding tasks.json / activity.json (default: data/)
    COMPHUB_CATALOG_PATH: YAML template catalog (default: packaged catalog)
    COMPHUB_HOST: bind address for `comphub serve` (default: 0.0.0.0)
    COMPHUB_PORT / PORT: listen port (default: 3000)

Entry points call ``load_dotenv`` before reading settings, so a local
``.env`` file works too.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "COMPHUB"
DEFAULT_DATA_DIR = "data"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_port() -> int:
    for name in (_k("PORT"), "PORT"):
        raw = os.getenv(name)
        if raw and raw.strip():
            try:
                return int(raw)
            except ValueError:
                continue
    return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    catalog_path: Optional[Path]
    host: str
    port: int


def get_settings() -> Settings:
    return Settings(
        data_dir=_env_path(_k("DATA_DIR")) or Path(DEFAULT_DATA_DIR),
        catalog_path=_env_path(_k("CATALOG_PATH")),
        host=os.getenv(_k("HOST"), DEFAULT_HOST).strip() or DEFAULT_HOST,
        port=_env_port(),
    )
