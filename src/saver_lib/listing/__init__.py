# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Presentation of the saved commands.

This module provides the `ListPresenter` class, which renders the names of
saved commands as a numbered list.
"""

from .presenter import ListPresenter

__all__ = [
    "ListPresenter",
]
