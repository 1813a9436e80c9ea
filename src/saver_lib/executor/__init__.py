# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution of saved commands.

This module provides the `Executor` class, which runs a command in the
foreground and reports its exit code.
"""

from .executor import Executor

__all__ = [
    "Executor",
]
