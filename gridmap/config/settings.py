"""
Settings: environment-driven defaults for the slicer service and CLI.

Environment Variables:
    GRIDMAP_GRIDS_W: Default horizontal grid count (24)
    GRIDMAP_GRIDS_H: Default vertical grid count (12)
    GRIDMAP_LOG_LEVEL: Logging level for the CLI (INFO)
"""
import logging
import os

from dotenv import load_dotenv

# Load .env file early
load_dotenv(override=True)

logger = logging.getLogger(__name__)

DEFAULT_GRIDS_W = 24
DEFAULT_GRIDS_H = 12


def _env_positive_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"[Settings] {name}={raw!r} is not an integer, using {default}")
        return default

    if value <= 0:
        logger.warning(f"[Settings] {name}={value} must be positive, using {default}")
        return default

    return value


# -----------------------------------------------------------------------------
# Grid defaults
# -----------------------------------------------------------------------------
GRIDS_W = _env_positive_int("GRIDMAP_GRIDS_W", DEFAULT_GRIDS_W)
GRIDS_H = _env_positive_int("GRIDMAP_GRIDS_H", DEFAULT_GRIDS_H)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("GRIDMAP_LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    logger.warning(f"[Settings] GRIDMAP_LOG_LEVEL={LOG_LEVEL!r} is not a level name, using INFO")
    LOG_LEVEL = "INFO"


def get_settings() -> dict:
    """Current settings as a plain dict."""
    return {
        "grids_w": GRIDS_W,
        "grids_h": GRIDS_H,
        "log_level": LOG_LEVEL,
    }


__all__ = [
    "DEFAULT_GRIDS_W",
    "DEFAULT_GRIDS_H",
    "GRIDS_W",
    "GRIDS_H",
    "LOG_LEVEL",
    "get_settings",
]
