"""Storage module for TypedKV."""

from .store import Store
from .value import DataType, TypedValue

__all__ = ["DataType", "Store", "TypedValue"]
