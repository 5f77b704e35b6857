"""
Shell Command and Response Definitions

This module defines the data structures passed between the parser and
the shell: a parsed Command and the Response rendered back to the user.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple


class CommandType(Enum):
    """Enumeration of supported command types."""
    SET = auto()
    GET = auto()
    EXISTS = auto()
    REMOVE = auto()
    LIST = auto()
    CLEAR = auto()
    SAVE = auto()
    LOAD = auto()
    HELP = auto()
    EXIT = auto()
    UNKNOWN = auto()


# Command word -> type. "quit" is accepted as an alias of "exit".
COMMAND_NAMES = {
    "set": CommandType.SET,
    "get": CommandType.GET,
    "exists": CommandType.EXISTS,
    "remove": CommandType.REMOVE,
    "list": CommandType.LIST,
    "clear": CommandType.CLEAR,
    "save": CommandType.SAVE,
    "load": CommandType.LOAD,
    "help": CommandType.HELP,
    "exit": CommandType.EXIT,
    "quit": CommandType.EXIT,
}

USAGE = {
    CommandType.SET: "set <key> <value>",
    CommandType.GET: "get <key>",
    CommandType.EXISTS: "exists <key>",
    CommandType.REMOVE: "remove <key>",
    CommandType.SAVE: "save <file>",
    CommandType.LOAD: "load <file>",
}

AVAILABLE_COMMANDS = (
    "Available commands: set, get, exists, remove, list, clear, "
    "save <file>, load <file>, help, exit"
)


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed shell command.

    Attributes:
        type: The type of command
        name: The command word as typed (used in "unknown command" errors)
        key: The key, or the file path for SAVE/LOAD
        value: The value for SET (remainder of the line, trimmed)
        raw: The original raw line
    """
    type: CommandType
    name: str = ""
    key: str = ""
    value: str = ""
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        """Check if the command carries the arguments its type needs."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type == CommandType.SET:
            return bool(self.key) and bool(self.value)
        if self.type in USAGE:
            return bool(self.key)
        return True

    @property
    def usage(self) -> str:
        """Usage line for this command type, empty if it takes no arguments."""
        return USAGE.get(self.type, "")


@dataclass
class Response:
    """
    Represents the result of one command.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        value: Preformatted output (GET, EXISTS, HELP) shown instead of message
        entries: Snapshot rows for LIST, None for other commands
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[str] = None
    entries: Optional[List[Tuple[str, str]]] = None

    @property
    def is_error(self) -> bool:
        return self.status == ResponseStatus.ERROR

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def stored(cls) -> "Response":
        return cls.ok(message="stored")

    @classmethod
    def removed(cls) -> "Response":
        return cls.ok(message="removed")

    @classmethod
    def cleared(cls) -> "Response":
        return cls.ok(message="cleared")

    @classmethod
    def saved(cls) -> "Response":
        return cls.ok(message="saved")

    @classmethod
    def loaded(cls) -> "Response":
        return cls.ok(message="loaded")

    @classmethod
    def key_not_found(cls) -> "Response":
        """Create a GET miss response (status OK)."""
        return cls.ok(value="Key not found")

    @classmethod
    def value_response(cls, key: str, value: str) -> "Response":
        """Create a GET response with a value."""
        return cls.ok(value=f"{key} = {value}")

    @classmethod
    def exists_response(cls, exists: bool) -> "Response":
        """Create an EXISTS response."""
        return cls.ok(value="1" if exists else "0")

    @classmethod
    def list_response(cls, entries: List[Tuple[str, str]]) -> "Response":
        """Create a LIST response from a store snapshot."""
        return cls(status=ResponseStatus.OK, entries=entries)

    @classmethod
    def usage_error(cls, command: Command) -> "Response":
        return cls.error(f"Usage: {command.usage}")

    @classmethod
    def unknown_command(cls, name: str) -> "Response":
        return cls.error(f"Unknown command: {name}\n{AVAILABLE_COMMANDS}")
