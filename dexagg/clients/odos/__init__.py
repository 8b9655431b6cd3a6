from .client import ODOS_HEADERS, OdosClient

__all__ = ["ODOS_HEADERS", "OdosClient"]
