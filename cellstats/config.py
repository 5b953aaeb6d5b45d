# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides a typed config object to the session and CLI.
#
# CLASSES:
# --------
# - CellsConfig (dataclass)
#     csv_path: str          (default "cells.csv")
#     log_level: str         (default "INFO")
#     report_on_load: bool   (default True)
#     interactive: bool      (default True)
#
# FUNCTIONS:
# ----------
# - get_config() -> CellsConfig
#     Load .env using python-dotenv, construct CellsConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton (used by tests).
#
# USAGE:
# ------
#   from cellstats.config import get_config
#   config = get_config()
#   print(config.csv_path)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}
FALSE_VARIANTS = {"0", "false", "no", "off"}


@dataclass
class CellsConfig:
    """Application configuration."""
    csv_path: str = "cells.csv"
    log_level: str = "INFO"
    report_on_load: bool = True
    interactive: bool = True


# Singleton instance
_config_instance: Optional[CellsConfig] = None


def _env_bool(name: str, default: bool) -> bool:
    """
    Read a boolean environment variable.

    Unrecognized values fall back to the default.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VARIANTS:
        return True
    if value in FALSE_VARIANTS:
        return False
    return default


def get_config() -> CellsConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        CellsConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    _config_instance = CellsConfig(
        csv_path=os.getenv("CELLS_CSV_PATH", "cells.csv"),
        log_level=os.getenv("CELLS_LOG_LEVEL", "INFO").upper(),
        report_on_load=_env_bool("CELLS_REPORT_ON_LOAD", True),
        interactive=_env_bool("CELLS_INTERACTIVE", True),
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
