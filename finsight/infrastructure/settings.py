"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from finsight.infrastructure.logging.logger import get_app_logger
from finsight.utils.utils import get_project_root


@dataclass(frozen=True)
class FinSightSettings:
    """Runtime settings sourced from the environment.

    Attributes:
        currency: Display currency code.
        export_dir: Directory receiving file exports.
        user_id: Default user for CLI and dashboard sessions.
    """

    currency: str = "INR"
    export_dir: Path = Path("exports")
    user_id: str | None = None

    @classmethod
    def from_env(cls) -> "FinSightSettings":
        """Build settings from environment variables.

        Returns:
            FinSightSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        currency = os.getenv("FINSIGHT_CURRENCY", "INR").strip().upper()
        raw_export_dir = os.getenv("FINSIGHT_EXPORT_DIR")
        export_dir = (
            cls._normalize_path(raw_export_dir)
            if raw_export_dir
            else get_project_root() / "exports"
        )
        user_id = os.getenv("FINSIGHT_USER_ID") or None
        if user_id is None:
            get_app_logger().warning(
                "FINSIGHT_USER_ID is not set; user-scoped commands need it."
            )
        return cls(currency=currency, export_dir=export_dir, user_id=user_id)

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Expand and resolve a directory path.

        Args:
            raw_path: Raw path string.

        Returns:
            Path: Absolute directory path.
        """
        return Path(raw_path).expanduser().resolve()


__all__ = ["FinSightSettings"]
