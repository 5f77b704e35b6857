"""
Interactive Shell Module

This module implements the command dispatcher: it reads one line at a
time, parses it, runs the matching KVStore operation and writes the
formatted result.

Successful output goes to the output stream, errors to the error stream.
No error ends the session; only "exit" or end of input does.
"""

import logging
import sys
from typing import Optional, TextIO

from .config.settings import settings
from .protocol.commands import Command, CommandType, Response
from .protocol.parser import CommandParser
from .store.store import KVStore

logger = logging.getLogger(__name__)

HELP_TEXT = """\
kv-shell commands:
  set <key> <value>   Store a value (the rest of the line, trimmed)
  get <key>           Show the value for a key
  exists <key>        Print 1 if the key is present, 0 otherwise
  remove <key>        Remove a key
  list                Show all entries
  clear               Remove all entries
  save <file>         Write all entries to a key=value file
  load <file>         Read entries from a key=value file
  help                Show this help message
  exit                Leave the shell"""


class Shell:
    """
    Line-oriented front end for a KVStore.

    Usage:
        shell = Shell(KVStore())
        shell.run()  # Reads stdin until "exit" or EOF

    Attributes:
        store: The KVStore all commands operate on
        parser: The CommandParser for parsing lines
        prompt: Text written before each line is read ("" for none)
    """

    def __init__(
            self,
            store: KVStore = None,
            stdin: TextIO = None,
            stdout: TextIO = None,
            stderr: TextIO = None,
            prompt: str = None,
    ):
        self.store = store if store is not None else KVStore()
        self.parser = CommandParser()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.prompt = prompt if prompt is not None else settings.PROMPT

        self._total_commands = 0

    def run(self) -> int:
        """
        Run the read-dispatch-print loop.

        Returns:
            Process exit status (always 0)
        """
        while True:
            if self.prompt:
                self.stdout.write(self.prompt)
                self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                logger.debug("End of input")
                break

            if not self.handle_line(line):
                break

        return 0

    def handle_line(self, line: str) -> bool:
        """
        Process one input line.

        Returns:
            False if the session should end, True otherwise
        """
        command = self.parser.parse_request(line)

        if command.type == CommandType.EXIT:
            logger.debug("Exit requested")
            return False

        # Blank line
        if command.type == CommandType.UNKNOWN and not command.name:
            return True

        try:
            response = self.execute(command)
        except Exception as exc:  # Log unexpected errors but keep the session alive
            logger.exception(f"Error handling {command.raw!r}: {exc}")
            response = Response.error(f"internal error: {exc}")

        self._write(response)
        return True

    def execute(self, command: Command) -> Response:
        """
        Execute a parsed command on the store.

        Args:
            command: The Command object to execute

        Returns:
            Response object with the result
        """
        if command.type == CommandType.UNKNOWN:
            return Response.unknown_command(command.name)

        if not command.is_valid:
            return Response.usage_error(command)

        self._total_commands += 1

        if command.type == CommandType.SET:
            self.store.set(command.key, command.value)
            return Response.stored()

        if command.type == CommandType.GET:
            value = self.store.get(command.key)
            if value is None:
                return Response.key_not_found()
            return Response.value_response(command.key, value)

        if command.type == CommandType.EXISTS:
            return Response.exists_response(self.store.exists(command.key))

        if command.type == CommandType.REMOVE:
            self.store.remove(command.key)
            return Response.removed()

        if command.type == CommandType.LIST:
            return Response.list_response(self.store.list())

        if command.type == CommandType.CLEAR:
            self.store.clear()
            return Response.cleared()

        if command.type == CommandType.SAVE:
            if self.store.save(command.key):
                return Response.saved()
            return Response.error(f"could not save to {command.key}")

        if command.type == CommandType.LOAD:
            if self.store.load(command.key):
                return Response.loaded()
            return Response.error(f"could not load from {command.key}")

        if command.type == CommandType.HELP:
            return Response.ok(value=HELP_TEXT)

        # EXIT: the loop itself ends in handle_line
        return Response.ok()

    def _write(self, response: Response) -> None:
        stream = self.stderr if response.is_error else self.stdout
        stream.write(self.parser.format_response(response))
        stream.flush()

    def get_stats(self) -> dict:
        return {
            "total_commands": self._total_commands,
            "store_size": self.store.size(),
            "load_mode": self.store.load_mode,
        }


def run_shell(store: KVStore = None, prompt: Optional[str] = None) -> int:
    """
    Convenience function to create and run a shell on stdin/stdout.

    Usage:
        sys.exit(run_shell())
    """
    return Shell(store=store, prompt=prompt).run()
