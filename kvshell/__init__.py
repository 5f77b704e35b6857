"""
kv-shell: In-Memory Key-Value Store

A thread-safe, in-memory string key-value store driven from an
interactive line-oriented shell, with save/load to a flat key=value file.
"""

__version__ = "1.0.0"
