"""
Key-Value Store Module

This module implements the core key-value storage and its flat-file
persistence.

Every public method holds the store's single lock for its whole body, so
all operations are mutually exclusive, reads included. save() and load()
keep the lock during file I/O, which makes them atomic with respect to
the other operations.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from ..config.settings import LOAD_MODES, settings
from .codec import decode_lines, encode_entries


class KVStore:
    """
    Thread-safe in-memory string key-value store.

    Operations:
    - set: Insert or overwrite an entry
    - get: Retrieve a value (None when absent)
    - remove: Erase an entry (no-op when absent)
    - exists: Membership test
    - clear: Remove all entries
    - list: Snapshot of all entries
    - save / load: Flat key=value file persistence

    Mutating operations and file failures are reported through the
    injected logger; failures never raise.

    Attributes:
        load_mode: "merge" keeps keys absent from the loaded file,
            "replace" discards them
    """

    def __init__(self, load_mode: str = None, logger: logging.Logger = None):
        """
        Initialize an empty store.

        Args:
            load_mode: "merge" or "replace" (default from settings.LOAD_MODE)
            logger: Logger receiving store events (default: module logger)

        Raises:
            ValueError: If load_mode is not a known mode
        """
        mode = load_mode if load_mode is not None else settings.LOAD_MODE
        if mode not in LOAD_MODES:
            raise ValueError(
                f"invalid load mode {mode!r}, expected one of {', '.join(LOAD_MODES)}"
            )
        self.load_mode = mode
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self._lock = threading.Lock()
        self._store: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the entry for key."""
        with self._lock:
            self._store[key] = value
            self.logger.info(f"Set: {{{key}: {value}}}")

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Returns:
            The value if present, None otherwise. An empty string is a
            stored value, not an absent one.
        """
        with self._lock:
            return self._store.get(key)

    def remove(self, key: str) -> bool:
        """
        Erase the entry for key.

        Removing a missing key is not an error.

        Returns:
            True if an entry was removed, False if the key was absent
        """
        with self._lock:
            removed = self._store.pop(key, None) is not None
            self.logger.info(f"Removed key: {key}")
            return removed

    def exists(self, key: str) -> bool:
        """Check if a key is present."""
        with self._lock:
            return key in self._store

    def clear(self) -> None:
        """Remove all entries from the store."""
        with self._lock:
            self._store.clear()
            self.logger.info("Store cleared")

    def list(self) -> List[Tuple[str, str]]:
        """
        Take a snapshot of all entries.

        Returns:
            List of (key, value) pairs; empty list for an empty store.
            Order is unspecified.
        """
        with self._lock:
            return list(self._store.items())

    def size(self) -> int:
        """Get the current number of entries."""
        with self._lock:
            return len(self._store)

    def save(self, path: str) -> bool:
        """
        Write every entry to path as key=value lines, overwriting the file.

        The snapshot is fully encoded before the file is opened, so an
        entry the configured encoding cannot represent leaves any existing
        file untouched.

        Args:
            path: Destination file path

        Returns:
            True on success, False if the file could not be written
        """
        with self._lock:
            try:
                data = "".join(encode_entries(self._store.items())).encode(settings.ENCODING)
                with open(path, "wb") as f:
                    f.write(data)
            except (OSError, UnicodeError, LookupError) as exc:
                self.logger.error(f"Could not save to file: {path} ({exc})")
                return False

            self.logger.info(f"Data saved to {path}")
            return True

    def load(self, path: str) -> bool:
        """
        Read key=value lines from path into the store.

        Each line is split on its first '='; lines without one are
        skipped. The whole file is decoded before the store is touched,
        so a failed load leaves the store unchanged.

        In "merge" mode loaded entries overwrite same-named keys and other
        keys are kept. In "replace" mode the store becomes exactly the
        file contents.

        Args:
            path: Source file path

        Returns:
            True on success, False if the file could not be read
        """
        with self._lock:
            try:
                with open(path, "r", encoding=settings.ENCODING, newline="\n") as f:
                    loaded = dict(decode_lines(f))
            except (OSError, UnicodeError, LookupError) as exc:
                self.logger.error(f"Could not open file: {path} ({exc})")
                return False

            if self.load_mode == "replace":
                self._store = loaded
            else:
                self._store.update(loaded)

            self.logger.info(f"Data loaded from {path}")
            return True
