# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution of a parsed saver invocation.

This module provides the `Dispatcher` class, which performs the sequence of
store and executor operations corresponding to an `Intent`.
"""

from .dispatcher import Dispatcher

__all__ = [
    "Dispatcher",
]
