"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import io
import logging
import pytest
from pathlib import Path

from kvshell.store.store import KVStore
from kvshell.protocol.parser import CommandParser
from kvshell.shell import Shell


# ============================================================================
# KVStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> KVStore:
    """Create a fresh KVStore in the default (merge) load mode."""
    return KVStore(load_mode="merge")


@pytest.fixture
def replace_store() -> KVStore:
    """Create a KVStore whose load replaces the whole mapping."""
    return KVStore(load_mode="replace")


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path for a snapshot file inside a per-test temp directory."""
    return tmp_path / "data.txt"


# ============================================================================
# Protocol Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


# ============================================================================
# Shell Fixtures
# ============================================================================

class ShellHarness:
    """
    Helper for driving a Shell with in-memory streams.

    Usage:
        harness = ShellHarness(store)
        out, err = harness.run("set a 1", "get a")
        assert "a = 1" in out
    """

    def __init__(self, store: KVStore):
        self.store = store
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.shell = Shell(
            store=store,
            stdin=io.StringIO(),
            stdout=self.stdout,
            stderr=self.stderr,
            prompt="",
        )

    def send(self, line: str) -> bool:
        """Feed one line to the shell; returns False once the session ends."""
        return self.shell.handle_line(line)

    def run(self, *lines: str) -> tuple:
        """
        Run a whole session over the given lines.

        Returns:
            (stdout text, stderr text) produced by this session
        """
        self.shell.stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        start_out = self.stdout.tell()
        start_err = self.stderr.tell()
        self.exit_status = self.shell.run()
        return (
            self.stdout.getvalue()[start_out:],
            self.stderr.getvalue()[start_err:],
        )


@pytest.fixture
def harness(store: KVStore) -> ShellHarness:
    """Create a shell harness around the store fixture."""
    return ShellHarness(store)


@pytest.fixture
def replace_harness(replace_store: KVStore) -> ShellHarness:
    """Create a shell harness around a replace-mode store."""
    return ShellHarness(replace_store)


@pytest.fixture
def restore_logging():
    """Drop root handlers added by a test that reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
