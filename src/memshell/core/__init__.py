"""
Core memshell components.

This package provides the node model, lexical path utilities, and the tree
navigator that the session layer is built on.
"""

from memshell.core.navigator import resolve, resolve_folder, resolve_mut
from memshell.core.node import File, Folder, Node, new_file, new_folder
from memshell.core.path_utils import (
    ResolvedPath,
    canonicalize,
    canonicalize_to_string,
    resolve_path,
    to_absolute,
)
from memshell.core.types import Argv, Segments

__all__ = [
    "File",
    "Folder",
    "Node",
    "new_file",
    "new_folder",
    "ResolvedPath",
    "canonicalize",
    "canonicalize_to_string",
    "resolve_path",
    "to_absolute",
    "resolve",
    "resolve_mut",
    "resolve_folder",
    "Argv",
    "Segments",
]
