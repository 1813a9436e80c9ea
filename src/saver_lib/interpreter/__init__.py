# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Interpretation of saver command-line tokens.

This module provides the `Interpreter` class, which turns the raw argument
tokens into a validated `Intent`, and `resolve_default_db_dir`, which derives
the default database directory from the environment.
"""

from .interpreter import Interpreter, resolve_default_db_dir

__all__ = [
    "Interpreter",
    "resolve_default_db_dir",
]
