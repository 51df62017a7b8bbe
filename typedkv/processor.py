"""
Command Processor Module

This module routes parsed commands to the Store and builds the responses.
The processor keeps no state of its own: the Store is passed in on every
call, so any number of independent stores can be driven by one processor.
"""

import logging
import re
from typing import Optional

from .errors import ValueDecodeError, ValueEncodeError
from .protocol.commands import (
    MSG_INVALID_BOOL,
    MSG_INVALID_FLOAT,
    MSG_INVALID_INT,
    Command,
    CommandType,
    Response,
)
from .protocol.parser import ProtocolParser
from .storage.store import Store
from .storage.value import DataType, TypedValue

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class CommandProcessor:
    """
    Validates and executes command lines against a Store.

    Usage:
        store = Store()
        processor = CommandProcessor()
        processor.process("SET age int 42", store)   # 'SET successful'
        processor.process("GET age", store)          # 'age: 42'

    Every error is reported as text; no command raises out of ``process``
    or ends the session.
    """

    def __init__(self, parser: ProtocolParser = None):
        self.parser = parser if parser is not None else ProtocolParser()

    def process(self, line: str, store: Store) -> Optional[str]:
        """
        Process one input line.

        Args:
            line: The raw input line
            store: The Store to operate on

        Returns:
            The formatted result or error text, or None for a blank line
        """
        command = self.parser.parse_request(line)
        if command.type == CommandType.EMPTY:
            return None

        response = self.execute(command, store)
        logger.debug(f"{command.raw!r} -> {response.status.value}")
        return self.parser.format_response(response)

    def execute(self, command: Command, store: Store) -> Response:
        """
        Execute a parsed command on the store.

        Args:
            command: The Command object to execute
            store: The Store to operate on

        Returns:
            Response object with the result
        """
        if not command.is_valid:
            logger.debug(f"Rejected {command.type.name}: {command.raw!r}")
            return command.error if command.error is not None else Response.unknown_command()

        if command.type == CommandType.GET:
            return self._execute_get(command, store)
        if command.type == CommandType.SET:
            return self._execute_set(command, store)

        return self._execute_debug(store)

    def _execute_get(self, command: Command, store: Store) -> Response:
        value = store.get(command.key)
        if value is None:
            return Response.key_not_found()

        try:
            rendered = value.render()
        except ValueDecodeError as exc:
            logger.warning(f"Corrupt {value.tag.name} value for key {command.key!r}: {exc}")
            return Response.corrupt_value(command.key)

        return Response.value_response(command.key, rendered)

    def _execute_set(self, command: Command, store: Store) -> Response:
        """
        Parse the value text for its declared type and store it.

        The store is only touched once the value has parsed, so a bad
        value leaves any previous value at the key in place.
        """
        if command.value_type == DataType.STRING:
            value = TypedValue.from_string(command.value)

        elif command.value_type == DataType.INT:
            value = parse_int(command.value)
            if value is None:
                return Response.error(MSG_INVALID_INT)

        elif command.value_type == DataType.FLOAT:
            value = parse_float(command.value)
            if value is None:
                return Response.error(MSG_INVALID_FLOAT)

        else:
            value = parse_bool(command.value)
            if value is None:
                return Response.error(MSG_INVALID_BOOL)

        store.set(command.key, value)
        return Response.set_successful()

    def _execute_debug(self, store: Store) -> Response:
        return Response.ok(*(f"{key}: {value.debug_repr()}" for key, value in store.items()))


def parse_int(text: str) -> Optional[TypedValue]:
    """Parse a signed 64-bit decimal integer, or return None."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    try:
        return TypedValue.from_int(int(text))
    except ValueEncodeError:
        return None


def parse_float(text: str) -> Optional[TypedValue]:
    """Parse a decimal, exponent, inf or nan float literal, or return None."""
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return TypedValue.from_float(float(text))


def parse_bool(text: str) -> Optional[TypedValue]:
    """Parse exactly 'true' or 'false', or return None."""
    if text == "true":
        return TypedValue.from_bool(True)
    if text == "false":
        return TypedValue.from_bool(False)
    return None
