"""Circuit container for PRAGMA operations."""

from .core import Circuit

__all__ = ["Circuit"]
