"""API routes package"""

from . import health, records

__all__ = ["health", "records"]
