"""
Session state and the operations the interpreter exposes.

A session owns a single root folder and the current working path. The
working path is kept as a canonical string (no leading or trailing
separator, empty for the root) and re-resolved against the tree on every
call instead of being cached as a node reference.
"""

import logging

from memshell.core.navigator import resolve, resolve_folder
from memshell.core.node import File, Folder, new_file, new_folder
from memshell.core.path_utils import resolve_path
from memshell.core.types import PATH_SEPARATOR
from memshell.exceptions import (
    NameConflictError,
    NotAFolderError,
    PathNotFoundError,
    PathValidationError,
)

logger = logging.getLogger(__name__)


class Session:
    """
    In-memory namespace session.

    Operations either complete or raise a ``MemShellError`` subclass; a failed
    operation never removes or renames nodes, so the tree stays consistent.

    Params:
        root: Root folder to start from, a fresh empty folder by default
    """

    def __init__(self, root: Folder | None = None):
        self._root = root if root is not None else new_folder()
        self._cwd = ""

    @property
    def root(self) -> Folder:
        return self._root

    @property
    def cwd(self) -> str:
        """Canonical working path without leading separator."""
        return self._cwd

    def pwd(self) -> str:
        """Return the absolute working path."""
        return PATH_SEPARATOR + self._cwd

    def ls(self, path: str | None = None) -> str:
        """
        List a folder's children.

        Params:
            path: Folder to list, the working path when omitted

        Returns:
            Sorted child names joined by spaces, empty for an empty folder

        Raises:
            PathNotFoundError: If the path does not exist
            NotAFolderError: If the path names a file
        """
        resolved = resolve_path(path or "", self._cwd)
        node = resolve(self._root, resolved.segments)
        shown = path if path is not None else self.pwd()
        if node is None:
            raise PathNotFoundError(shown)
        if not isinstance(node, Folder):
            raise NotAFolderError(shown)
        return node.listing()

    def mkdir(self, path: str) -> None:
        """
        Create a folder and every missing folder above it.

        Existing folders along the path are reused, so repeating the call is a
        no-op. Folders created before a conflict is found are kept.

        Params:
            path: Folder to create, relative to the working path or absolute

        Raises:
            NameConflictError: If a segment is already taken by a file
        """
        resolved = resolve_path(path, self._cwd)
        folder = self._root
        for segment in resolved.segments:
            child = folder.get(segment)
            if isinstance(child, File):
                raise NameConflictError(segment, "file")
            if child is None:
                child = new_folder()
                folder.insert(segment, child)
                logger.debug(f"Created folder '{segment}' while making '{path}'")
            folder = child

    def cd(self, path: str | None = None) -> None:
        """
        Change the working path.

        Params:
            path: Target folder; without it the working path returns to the root

        Raises:
            PathNotFoundError: If the target does not exist
            NotAFolderError: If the target is a file
        """
        if path is None:
            self._cwd = ""
            logger.debug("Working path reset to root")
            return

        resolved = resolve_path(path, self._cwd)
        node = resolve(self._root, resolved.segments)
        if node is None:
            raise PathNotFoundError(path)
        if not isinstance(node, Folder):
            raise NotAFolderError(path)
        self._cwd = resolved.canonical
        logger.debug(f"Working path changed to '{self.pwd()}'")

    def create_file(self, path: str, content: str = "") -> File:
        """
        Create a file inside an existing folder.

        Params:
            path: File to create, relative to the working path or absolute
            content: Initial text content

        Returns:
            The new file node

        Raises:
            PathValidationError: If the path names the root
            PathNotFoundError: If the parent folder does not exist
            NotAFolderError: If the parent is a file
            NameConflictError: If the name is already taken
        """
        resolved = resolve_path(path, self._cwd)
        if resolved.is_root:
            raise PathValidationError(path, "cannot create a file at the root")

        parent = resolve_folder(
            self._root,
            resolved.parent_segments,
            PATH_SEPARATOR + PATH_SEPARATOR.join(resolved.parent_segments),
        )
        existing = parent.get(resolved.name)
        if existing is not None:
            raise NameConflictError(
                resolved.name, "folder" if isinstance(existing, Folder) else "file"
            )

        node = new_file(content)
        parent.insert(resolved.name, node)
        logger.debug(f"Created file '{PATH_SEPARATOR}{resolved.canonical}'")
        return node

    def exists(self, path: str) -> bool:
        """Return whether ``path`` resolves to any node."""
        return resolve(self._root, resolve_path(path, self._cwd).segments) is not None
