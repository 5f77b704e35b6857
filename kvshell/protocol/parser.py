"""
Command Parser Module

This module turns one line of shell input into a Command and renders a
Response back into text.
"""

from .commands import COMMAND_NAMES, Command, CommandType, Response


class CommandParser:
    """
    Parser for the kv-shell command language.

    Format:
        Request:  <command> [ARGS...]
        Response: free text, or "<STATUS> <message>" for acknowledgements

    Commands:
        set <key> <value...>   -> OK stored
        get <key>              -> <key> = <value> | Key not found
        exists <key>           -> 1 | 0
        remove <key>           -> OK removed
        list                   -> [STORE DUMP] listing | (empty)
        clear                  -> OK cleared
        save <file>            -> OK saved | ERROR could not save to <file>
        load <file>            -> OK loaded | ERROR could not load from <file>
        help                   -> command summary
        exit                   -> (session ends)

    Command words are case-insensitive; keys and values are not. The
    value of "set" is everything after the key, trimmed, so it may contain
    spaces and '=' characters.

    A command with missing arguments is still returned with its type so the
    shell can report a usage message; check Command.is_valid.
    """

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw input line into a Command object.

        Args:
            data: Raw line (may include trailing newline)

        Returns:
            Command object. Blank input and unrecognized command words give
            type=UNKNOWN; an empty name means the line was blank.

        Examples:
            >>> parser = CommandParser()
            >>> cmd = parser.parse_request("set greeting hello world")
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.key, cmd.value
            ('greeting', 'hello world')
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        parts = raw.split(maxsplit=1)
        name = parts[0]
        rest = parts[1] if len(parts) > 1 else ""

        command_type = COMMAND_NAMES.get(name.lower(), CommandType.UNKNOWN)

        if command_type == CommandType.SET:
            return self._parse_set(name, rest, raw)
        if command_type == CommandType.UNKNOWN:
            return Command(type=CommandType.UNKNOWN, name=name, raw=raw)

        # Single-argument commands read one token; extra tokens are ignored
        key = rest.split()[0] if rest else ""
        return Command(type=command_type, name=name, key=key, raw=raw)

    def _parse_set(self, name: str, rest: str, raw: str) -> Command:
        """
        Parse a SET command.

        Format: set <key> <value...>
        """
        parts = rest.split(maxsplit=1)
        key = parts[0] if parts else ""
        value = parts[1].strip() if len(parts) > 1 else ""
        return Command(type=CommandType.SET, name=name, key=key, value=value, raw=raw)

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into display text.

        Args:
            response: Response object to format

        Returns:
            Formatted text WITH trailing newline.

        Examples:
            >>> parser = CommandParser()
            >>> parser.format_response(Response.stored())
            'OK stored\\n'
            >>> parser.format_response(Response.value_response("name", "Abhishek"))
            'name = Abhishek\\n'
            >>> parser.format_response(Response.list_response([]))
            '(empty)\\n'
        """
        if response.entries is not None:
            return self._format_entries(response.entries)

        if response.value is not None:
            return f"{response.value}\n"

        prefix = response.status.value
        if response.message:
            return f"{prefix} {response.message}\n"
        return f"{prefix}\n"

    def _format_entries(self, entries) -> str:
        if not entries:
            return "(empty)\n"
        lines = ["[STORE DUMP]"]
        lines.extend(f"- {key}: {value}" for key, value in entries)
        return "\n".join(lines) + "\n"
