"""
Configuration package.
"""
from .settings import GRIDS_W, GRIDS_H, LOG_LEVEL, get_settings

__all__ = ["GRIDS_W", "GRIDS_H", "LOG_LEVEL", "get_settings"]
