# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Runtime Settings
# © 2026 Aparajita Parihar. All rights reserved.
#
# Environment-driven settings for the service layer. A .env file at the
# project root is loaded first; real environment variables take precedence.
# The calculation engine never reads settings: it only receives tables.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

LOG_LEVEL_ENV = "OPENDPE_LOG_LEVEL"
BATCH_WORKERS_ENV = "OPENDPE_BATCH_WORKERS"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BATCH_WORKERS = 4

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Load .env from project root (parent directory of config/)
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    batch_workers: int = DEFAULT_BATCH_WORKERS


def _read_workers(raw: Optional[str]) -> int:
    try:
        workers = int(raw) if raw else DEFAULT_BATCH_WORKERS
    except ValueError:
        return DEFAULT_BATCH_WORKERS
    return workers if workers >= 1 else DEFAULT_BATCH_WORKERS


def _read_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in _LEVELS else DEFAULT_LOG_LEVEL


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment (after loading the .env file)."""
    load_dotenv(env_file or _env_path)
    return Settings(
        log_level=_read_level(os.getenv(LOG_LEVEL_ENV)),
        batch_workers=_read_workers(os.getenv(BATCH_WORKERS_ENV)),
    )


def configure_logging(settings: Optional[Settings] = None) -> Settings:
    """Apply the configured log level to the root logger.

    services.batch.evaluate_file calls this on entry; code calling the engine
    or evaluate_batch directly configures logging itself.
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)
    return settings
