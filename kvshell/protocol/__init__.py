"""Command protocol module for kv-shell."""

from .commands import Command, CommandType, Response, ResponseStatus
from .parser import CommandParser

__all__ = [
    "Command",
    "CommandType",
    "Response",
    "ResponseStatus",
    "CommandParser",
]
