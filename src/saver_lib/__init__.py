# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the saver command-line tool.

saver bookmarks shell commands: it stores named command lines as plain text
records in a database directory and later lists, shows, re-runs, or deletes
them. The `saver` command delegates argument interpretation, record storage,
and command execution to the packages defined here.
"""

from .saver import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "dispatch",
    "executor",
    "interpreter",
    "listing",
    "properties",
    "store",
]
