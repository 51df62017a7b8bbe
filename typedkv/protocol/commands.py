"""
Protocol Command and Response Definitions

This module defines the data structures for protocol commands and responses.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from ..storage.value import DataType

TYPE_NAMES = "str, int, float, bool"

MSG_SET_SUCCESSFUL = "SET successful"
MSG_KEY_NOT_FOUND = "Key not found"
MSG_UNKNOWN_COMMAND = "Unknown command"
MSG_USAGE_GET = "Usage: GET <key>"
MSG_USAGE_SET = "Usage: SET <key> <type> <value>"
MSG_TYPES = f"Types: {TYPE_NAMES}"
MSG_INVALID_TYPE = f"Invalid type. Use: {TYPE_NAMES}"
MSG_INVALID_INT = "Invalid integer value"
MSG_INVALID_FLOAT = "Invalid float value"
MSG_INVALID_BOOL = "Invalid boolean value (use 'true' or 'false')"


class CommandType(Enum):
    """Enumeration of supported command types."""
    GET = auto()
    SET = auto()
    DEBUG = auto()
    EMPTY = auto()
    UNKNOWN = auto()


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed protocol command.

    Attributes:
        type: The type of command (GET, SET, DEBUG, EMPTY, UNKNOWN)
        key: The key for GET and SET
        value_type: The declared type for SET (None otherwise)
        value: The raw value text for SET, tokens rejoined with single spaces
        raw: The original raw command string
        error: The usage or type error found while parsing, if any
    """
    type: CommandType
    key: str = ""
    value_type: Optional[DataType] = None
    value: str = ""
    raw: str = ""
    error: Optional["Response"] = None

    @property
    def is_valid(self) -> bool:
        """Check if the command can be executed against the store."""
        if self.error is not None:
            return False
        if self.type == CommandType.DEBUG:
            return True
        if self.type == CommandType.GET:
            return bool(self.key)
        if self.type == CommandType.SET:
            return bool(self.key) and self.value_type is not None
        return False


@dataclass
class Response:
    """
    Represents a protocol response.

    Attributes:
        status: OK or ERROR
        lines: Output lines, written in order
    """
    status: ResponseStatus
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The response as a single newline-joined string."""
        return "\n".join(self.lines)

    @classmethod
    def ok(cls, *lines: str) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, lines=list(lines))

    @classmethod
    def error(cls, *lines: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, lines=list(lines))

    @classmethod
    def set_successful(cls) -> "Response":
        """Create the response for a stored SET."""
        return cls.ok(MSG_SET_SUCCESSFUL)

    @classmethod
    def key_not_found(cls) -> "Response":
        """Create a 'Key not found' response for a GET miss."""
        return cls.error(MSG_KEY_NOT_FOUND)

    @classmethod
    def value_response(cls, key: str, rendered: str) -> "Response":
        """Create a GET response with a rendered value."""
        return cls.ok(f"{key}: {rendered}")

    @classmethod
    def usage_get(cls) -> "Response":
        """Create the GET usage error."""
        return cls.error(MSG_USAGE_GET)

    @classmethod
    def usage_set(cls) -> "Response":
        """Create the two-line SET usage error."""
        return cls.error(MSG_USAGE_SET, MSG_TYPES)

    @classmethod
    def invalid_type(cls) -> "Response":
        """Create the error for an unrecognized SET type name."""
        return cls.error(MSG_INVALID_TYPE)

    @classmethod
    def unknown_command(cls) -> "Response":
        """Create the error for an unrecognized command."""
        return cls.error(MSG_UNKNOWN_COMMAND)

    @classmethod
    def corrupt_value(cls, key: str) -> "Response":
        """Create the error for a stored payload that does not decode."""
        return cls.error(f"Corrupt value for key '{key}'")
