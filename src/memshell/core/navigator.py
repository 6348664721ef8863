"""
Tree navigation over canonical segment sequences.

Resolution is all-or-nothing: a missing segment, or a file met before the
segments are exhausted, yields no node at all.
"""

from memshell.core.node import Folder, Node
from memshell.core.types import PATH_SEPARATOR, Segments
from memshell.exceptions import NotAFolderError, PathNotFoundError


def resolve(root: Folder, segments: Segments) -> Node | None:
    """
    Walk ``segments`` from ``root`` and return the node they name.

    Params:
        root: Root folder of the tree
        segments: Canonical, root-relative segments

    Returns:
        The node found, ``root`` for an empty sequence, or None if any segment
        is missing or an intermediate node is a file
    """
    node: Node = root
    for segment in segments:
        if not isinstance(node, Folder):
            return None
        child = node.get(segment)
        if child is None:
            return None
        node = child
    return node


def resolve_mut(root: Folder, segments: Segments) -> Node | None:
    """
    Resolve ``segments`` to the live node for in-place mutation.

    Nodes are shared references, so this performs the same walk as
    ``resolve``; it exists to mark call sites that modify what they find.
    """
    return resolve(root, segments)


def resolve_folder(root: Folder, segments: Segments, path: str | None = None) -> Folder:
    """
    Resolve ``segments`` and require the result to be a folder.

    Params:
        root: Root folder of the tree
        segments: Canonical, root-relative segments
        path: Path to report in errors, defaults to the joined segments

    Returns:
        The folder found

    Raises:
        PathNotFoundError: If nothing exists at the path
        NotAFolderError: If the path names a file
    """
    if path is None:
        path = PATH_SEPARATOR + PATH_SEPARATOR.join(segments)
    node = resolve_mut(root, segments)
    if node is None:
        raise PathNotFoundError(path)
    if not isinstance(node, Folder):
        raise NotAFolderError(path)
    return node
