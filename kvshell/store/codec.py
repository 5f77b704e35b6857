"""
Flat File Codec

Encodes store entries to, and decodes them from, the snapshot format:

    key1=value1
    key2=value2

One entry per line, no header, no quoting and no escaping. A line is split
on its first '=' only, so values may contain '=' but keys may not. Keys or
values containing a newline cannot be round-tripped. Only '\\n' ends a
line; a single '\\r' before it is dropped so CRLF files load, which means
a value ending in '\\r' loses that character. A '\\r' anywhere else is
kept.
"""

from typing import Iterable, Iterator, Optional, Tuple

SEPARATOR = "="


def encode_entry(key: str, value: str) -> str:
    """Encode one entry as a newline-terminated line."""
    return f"{key}{SEPARATOR}{value}\n"


def encode_entries(entries: Iterable[Tuple[str, str]]) -> Iterator[str]:
    """Encode entries one line at a time, in the order given."""
    for key, value in entries:
        yield encode_entry(key, value)


def decode_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Decode a single line into a (key, value) pair.

    Args:
        line: One line of the file, with or without its line terminator

    Returns:
        (key, value), or None if the line has no separator

    Examples:
        >>> decode_line("name=Abhishek\\n")
        ('name', 'Abhishek')
        >>> decode_line("expr=a=b")
        ('expr', 'a=b')
        >>> decode_line("garbage") is None
        True
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        return None
    return key, value


def decode_lines(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Decode lines, silently skipping any without a separator."""
    for line in lines:
        entry = decode_line(line)
        if entry is not None:
            yield entry
