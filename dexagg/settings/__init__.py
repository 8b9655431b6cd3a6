"""Settings package for the DEX aggregator clients."""

from .config import Settings, settings

__all__ = ["Settings", "settings"]
