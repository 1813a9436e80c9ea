# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Data types describing a single saver invocation.

This package defines the `Action` enum (the five operations saver supports)
and the `Intent` dataclass (a validated, parsed invocation).
"""

from .action import Action
from .intent import Intent

__all__ = [
    "Action",
    "Intent",
]
