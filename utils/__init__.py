"""Utility modules for the README regenerator."""

from .Args import Args
from .Logger import Logger

__all__ = ["Args", "Logger"]
