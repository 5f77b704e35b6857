"""Store module for kv-shell."""

from .codec import decode_line, decode_lines, encode_entries, encode_entry
from .store import KVStore

__all__ = ["KVStore", "encode_entry", "encode_entries", "decode_line", "decode_lines"]
