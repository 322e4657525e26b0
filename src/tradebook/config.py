"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Tradebook"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("TRADEBOOK_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("TRADEBOOK_DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv("TRADEBOOK_LOG_LEVEL", "INFO").upper()
        self.DATA_DIR = self._resolve_data_dir()
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("TRADEBOOK_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("TRADEBOOK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


class DevConfig(BaseConfig):
    """Development configuration with debug tooling enabled."""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.SECRET_KEY = os.getenv("TRADEBOOK_SECRET_KEY", "testing")
