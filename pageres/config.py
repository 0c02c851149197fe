"""Centralised settings for pageres.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Runner
    # ------------------------------------------------------------------
    runner: str = field(
        default_factory=lambda: os.environ.get(
            "PAGERES_RUNNER", "pageres.runner.dry_run:DryRunRunner"
        )
    )
    dest: Path | None = field(
        default_factory=lambda: (
            Path(os.environ["PAGERES_DEST"]) if os.environ.get("PAGERES_DEST") else None
        )
    )

    # ------------------------------------------------------------------
    # Process guard
    # ------------------------------------------------------------------
    allow_root: bool = field(default_factory=lambda: _env_flag("PAGERES_ALLOW_ROOT"))

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("PAGERES_LOG_LEVEL", "WARNING").upper()
    )

    @property
    def dest_dir(self) -> Path:
        """Directory screenshots are written to (the working directory by default)."""
        return self.dest if self.dest is not None else Path.cwd()


# Module-level singleton — import this everywhere:
#   from pageres.config import settings
settings = Settings()
