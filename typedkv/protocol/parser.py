"""
Protocol Parser Module

This module handles parsing of raw command lines and formatting of responses.
"""

from typing import Dict, List

from .commands import Command, CommandType, Response
from ..storage.value import DataType

# Accepted SET type names (matched case-insensitively)
TYPE_ALIASES: Dict[str, DataType] = {
    "str": DataType.STRING,
    "string": DataType.STRING,
    "int": DataType.INT,
    "i64": DataType.INT,
    "float": DataType.FLOAT,
    "f64": DataType.FLOAT,
    "bool": DataType.BOOL,
}


class ProtocolParser:
    """
    Parser for the TypedKV line protocol.

    Protocol Format:
        Request:  <COMMAND> [ARGS...]   (tokens separated by single spaces)
        Response: one or more lines of text

    Commands:
        GET <key>                    -> <key>: <value> | Key not found
        SET <key> <type> <value...>  -> SET successful
        DEBUG                        -> one line per stored pair

    The command name and the SET type name are case-insensitive; keys are
    case-sensitive. A SET value is every token after the type, rejoined
    with single spaces, so string values may contain spaces.
    """

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw request line into a Command object.

        Args:
            data: Raw request line (may include surrounding whitespace)

        Returns:
            Command object representing the parsed request. Blank input
            yields an EMPTY command; malformed GET or SET commands carry
            the usage error in ``Command.error``.

        Examples:
            >>> parser = ProtocolParser()
            >>> cmd = parser.parse_request("SET name str Ada Lovelace")
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.value_type == DataType.STRING
            True
            >>> cmd.value
            'Ada Lovelace'
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.EMPTY, raw=raw)

        parts = raw.split(" ")
        command_name = parts[0].upper()

        if command_name == "GET":
            return self._parse_get(parts, raw)
        if command_name == "SET":
            return self._parse_set(parts, raw)
        if command_name == "DEBUG":
            return Command(type=CommandType.DEBUG, raw=raw)

        return Command(type=CommandType.UNKNOWN, raw=raw, error=Response.unknown_command())

    def _parse_get(self, parts: List[str], raw: str) -> Command:
        """
        Parse a GET command.

        Format: GET <key>
        """
        if len(parts) < 2 or not parts[1]:
            return Command(type=CommandType.GET, raw=raw, error=Response.usage_get())

        return Command(type=CommandType.GET, key=parts[1], raw=raw)

    def _parse_set(self, parts: List[str], raw: str) -> Command:
        """
        Parse a SET command.

        Format: SET <key> <type> <value...>

        Args:
            parts: List of command parts (already split)
            raw: Original raw command string

        Returns:
            Command object for SET; ``error`` is set when the arity or the
            type name is wrong
        """
        if len(parts) < 4 or not parts[1]:
            return Command(type=CommandType.SET, raw=raw, error=Response.usage_set())

        key = parts[1]
        value_type = TYPE_ALIASES.get(parts[2].lower())
        if value_type is None:
            return Command(type=CommandType.SET, key=key, raw=raw, error=Response.invalid_type())

        return Command(
            type=CommandType.SET,
            key=key,
            value_type=value_type,
            value=" ".join(parts[3:]),
            raw=raw,
        )

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into output text.

        Args:
            response: Response object to format

        Returns:
            The response lines joined with newlines, without a trailing
            newline. An empty response yields an empty string.
        """
        return response.text
