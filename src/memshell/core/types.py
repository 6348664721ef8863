"""
Core type definitions for memshell.

This module contains type aliases shared by the path utilities, the
navigator, and the command layer.
"""

Segments = list[str]

Argv = list[str]

PATH_SEPARATOR = "/"
