"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from gemdash.infrastructure.logging.logger import get_app_logger
from gemdash.utils.utils import get_project_root

STORE_BACKENDS = ("sqlalchemy", "json")


@dataclass(frozen=True)
class StoreSettings:
    """Settings for selecting the record store backend.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        table: Key/value table read by the SQLAlchemy backend.
        json_file: Optional path to a JSON export of the browser store.
    """

    backend: str = "sqlalchemy"
    table: str = "record_store"
    json_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "StoreSettings":
        """Build settings from environment variables.

        Returns:
            StoreSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("GEMDASH_STORE_BACKEND", "sqlalchemy")
        backend = backend.strip().lower()
        if backend not in STORE_BACKENDS:
            logger.warning(
                f"Unknown store backend {backend!r}; using sqlalchemy"
            )
            backend = "sqlalchemy"
        table = os.getenv("GEMDASH_STORE_TABLE", "").strip() or "record_store"
        raw_file = os.getenv("GEMDASH_STORE_FILE")
        if raw_file:
            json_file = cls._normalize_path(raw_file, logger=logger)
        else:
            json_file = cls._default_json_file(logger=logger)
        return cls(backend=backend, table=table, json_file=json_file)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON export path, accepting file:// URIs.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Store file does not exist at {path}")
        return path

    @staticmethod
    def _default_json_file(logger) -> Path | None:
        """Return the single JSON export found in data/, if any."""
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set GEMDASH_STORE_FILE to choose one."
            )
        return None


__all__ = ["StoreSettings", "STORE_BACKENDS"]
