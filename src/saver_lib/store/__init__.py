# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
On-disk storage of saved commands.

This module provides the `RecordStore` class, which maps command names to
single-line text records inside the database directory.
"""

from .store import RecordStore

__all__ = [
    "RecordStore",
]
