"""Protocol module for TypedKV."""

from .commands import Command, CommandType, Response, ResponseStatus
from .parser import ProtocolParser

__all__ = [
    "Command",
    "CommandType",
    "Response",
    "ResponseStatus",
    "ProtocolParser",
]
