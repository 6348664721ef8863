"""
Node model for the in-memory namespace tree.

A node is either a Folder, which owns a mapping of child name to node, or a
File, which holds opaque text content. The two kinds form a closed union
discriminated by the ``kind`` field; callers tell them apart with
``isinstance`` or the ``is_folder``/``is_file`` helpers.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from memshell.core.types import PATH_SEPARATOR
from memshell.exceptions import PathValidationError

RESERVED_NAMES = frozenset({".", ".."})


def validate_child_name(name: str) -> None:
    """
    Check that a name can be used as a key in a folder.

    Params:
        name: Candidate child name

    Raises:
        PathValidationError: If the name is empty, contains a separator,
            or is one of the reserved relative names
    """
    if not name:
        raise PathValidationError(name, "name must not be empty")
    if PATH_SEPARATOR in name:
        raise PathValidationError(name, f"name must not contain '{PATH_SEPARATOR}'")
    if name in RESERVED_NAMES:
        raise PathValidationError(name, "name is reserved")


class Folder(BaseModel):
    """
    Directory node owning its children.

    Children are only ever inserted as freshly constructed nodes, so every node
    has at most one parent and the structure stays a tree.

    Params:
        children: Mapping of child name to node
    """

    kind: Literal["folder"] = "folder"
    children: dict[str, "Node"] = Field(default_factory=dict)

    def is_folder(self) -> bool:
        return True

    def is_file(self) -> bool:
        return False

    def as_folder(self) -> "Folder | None":
        return self

    def as_file(self) -> "File | None":
        return None

    def get(self, name: str) -> "Node | None":
        """Return the child called ``name`` or None."""
        return self.children.get(name)

    def insert(self, name: str, node: "Node") -> bool:
        """
        Insert a child unless the name is already taken.

        An existing entry is never overwritten, whatever its kind.

        Params:
            name: Child name
            node: Node to store under ``name``

        Returns:
            True if the node was inserted, False if the name already existed

        Raises:
            PathValidationError: If ``name`` is not a valid child name
        """
        validate_child_name(name)
        if name in self.children:
            return False
        self.children[name] = node
        return True

    def listing(self) -> str:
        """
        Render the child names for display.

        Returns:
            Child names sorted lexicographically and joined by single spaces,
            or an empty string for a folder without children
        """
        return " ".join(sorted(self.children))


class File(BaseModel):
    """Leaf node holding text content."""

    kind: Literal["file"] = "file"
    content: str = ""

    def is_folder(self) -> bool:
        return False

    def is_file(self) -> bool:
        return True

    def as_folder(self) -> Folder | None:
        return None

    def as_file(self) -> "File | None":
        return self


Node = Annotated[Union[Folder, File], Field(discriminator="kind")]

Folder.model_rebuild()


def new_folder() -> Folder:
    """Create an empty folder."""
    return Folder()


def new_file(content: str = "") -> File:
    """Create a file holding ``content``."""
    return File(content=content)
