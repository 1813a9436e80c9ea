# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for saver.

This module collects the foundational helpers used across the saver codebase:
configuration, error types, structured logging, and help formatting.
"""
