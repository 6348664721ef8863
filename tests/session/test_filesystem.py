"""
Tests for session operations.

Focus Areas:
1. Recursive, idempotent mkdir and its conflict handling
2. cd/pwd working path tracking
3. ls on folders, files, and missing paths
4. File creation through the session
"""

import pytest

from memshell.core.node import File, Folder
from memshell.exceptions import (
    NameConflictError,
    NotAFolderError,
    PathNotFoundError,
    PathValidationError,
)
from memshell.session import Session


class TestPwd:
    """Test pwd output."""

    def test_root(self, session):
        assert session.pwd() == "/"
        assert session.cwd == ""

    def test_after_cd(self, session):
        session.mkdir("a/b")
        session.cd("a/b")

        assert session.pwd() == "/a/b"


class TestMkdir:
    """Test folder creation."""

    def test_creates_intermediate_folders(self, session):
        """mkdir a/b/c then ls a/b lists c."""
        session.mkdir("a/b/c")

        assert session.ls("a/b") == "c"
        assert session.ls("a") == "b"

    def test_repeat_is_noop(self, session):
        """Running mkdir twice leaves exactly one folder."""
        session.mkdir("a")
        first = session.root.get("a")
        session.mkdir("a")

        assert session.ls() == "a"
        assert session.root.get("a") is first
        assert list(session.root.children) == ["a"]

    def test_idempotent_on_nested_path(self, session):
        session.mkdir("a/b/c")
        before = session.root.model_dump()
        session.mkdir("a/b/c")

        assert session.root.model_dump() == before

    def test_existing_file_blocks_creation(self, session):
        """mkdir over a file fails and leaves the file in place."""
        original = session.create_file("x")

        with pytest.raises(NameConflictError) as exc_info:
            session.mkdir("x")

        assert str(exc_info.value) == "File 'x' exists!"
        assert exc_info.value.name == "x"
        assert session.root.get("x") is original
        assert list(session.root.children) == ["x"]

    def test_nothing_created_below_file(self, session):
        session.create_file("x")

        with pytest.raises(NameConflictError):
            session.mkdir("x/y/z")

        assert session.root.get("x").is_file()
        assert session.ls() == "x"

    def test_conflict_deeper_in_existing_path(self, session):
        """A file inside an existing folder stops the walk at that segment."""
        session.mkdir("a")
        session.create_file("a/f")

        with pytest.raises(NameConflictError) as exc_info:
            session.mkdir("/p/../a/f/g")

        assert exc_info.value.name == "f"
        assert session.ls("/") == "a"
        assert session.ls("/a") == "f"
        assert session.root.get("a").get("f").is_file()

    def test_relative_to_cwd(self, session):
        session.mkdir("a")
        session.cd("a")
        session.mkdir("b/c")

        assert session.ls("/a/b") == "c"

    def test_absolute_ignores_cwd(self, session):
        session.mkdir("a")
        session.cd("a")
        session.mkdir("/top")

        assert session.ls("/") == "a top"

    def test_dot_segments(self, session):
        session.mkdir("a/./b/../c")

        assert session.ls("a") == "c"

    def test_root_is_noop(self, session):
        session.mkdir("/")
        session.mkdir("..")

        assert session.ls() == ""


class TestCd:
    """Test working path changes."""

    def test_cd_then_parent(self, session):
        """cd a/b then cd .. leaves the working path at /a."""
        session.mkdir("a/b")
        session.cd("a/b")
        session.cd("..")

        assert session.pwd() == "/a"

    def test_pwd_shows_resolved_path(self, session):
        session.mkdir("a/b")
        session.cd("/a/./b/../b/")

        assert session.pwd() == "/a/b"

    def test_without_argument_returns_to_root(self, session):
        session.mkdir("a")
        session.cd("a")
        session.cd()

        assert session.pwd() == "/"

    def test_parent_of_root_stays_at_root(self, session):
        session.cd("../..")

        assert session.pwd() == "/"

    def test_missing_path(self, session):
        with pytest.raises(PathNotFoundError) as exc_info:
            session.cd("nope")

        assert str(exc_info.value) == "'nope': No such file or directory"
        assert session.pwd() == "/"

    def test_file_rejected(self, populated_session):
        """cd into a file fails and leaves the working path alone."""
        populated_session.cd("a")

        with pytest.raises(NotAFolderError) as exc_info:
            populated_session.cd("notes.txt")

        assert str(exc_info.value) == "'notes.txt': Not a directory"
        assert populated_session.pwd() == "/a"


class TestLs:
    """Test folder listing."""

    def test_empty_root(self, session):
        assert session.ls() == ""

    def test_sorted_regardless_of_insertion(self, session):
        for name in ["zeta", "alpha", "mid"]:
            session.mkdir(name)

        assert session.ls() == "alpha mid zeta"

    def test_lists_cwd_by_default(self, populated_session):
        populated_session.cd("a")

        assert populated_session.ls() == "b notes.txt"

    def test_relative_and_absolute(self, populated_session):
        populated_session.cd("a/b")

        assert populated_session.ls("..") == "b notes.txt"
        assert populated_session.ls("/") == "a docs readme"

    def test_missing_path(self, session):
        with pytest.raises(PathNotFoundError) as exc_info:
            session.ls("nope")

        assert exc_info.value.path == "nope"

    def test_file_path(self, populated_session):
        with pytest.raises(NotAFolderError):
            populated_session.ls("readme")


class TestCreateFile:
    """Test file creation through the session."""

    def test_creates_file_with_content(self, session):
        node = session.create_file("x", "body")

        assert isinstance(node, File)
        assert session.root.get("x") is node
        assert node.content == "body"

    def test_nested_path(self, populated_session):
        assert isinstance(populated_session.root.get("a").get("notes.txt"), File)
        assert populated_session.exists("/a/notes.txt")

    def test_missing_parent(self, session):
        with pytest.raises(PathNotFoundError) as exc_info:
            session.create_file("a/x")

        assert exc_info.value.path == "/a"

    def test_parent_is_file(self, populated_session):
        with pytest.raises(NotAFolderError):
            populated_session.create_file("readme/x")

    def test_name_taken_by_folder(self, populated_session):
        with pytest.raises(NameConflictError) as exc_info:
            populated_session.create_file("docs")

        assert str(exc_info.value) == "Folder 'docs' exists!"
        assert isinstance(populated_session.root.get("docs"), Folder)

    def test_name_taken_by_file(self, populated_session):
        with pytest.raises(NameConflictError):
            populated_session.create_file("readme", "new")

        assert populated_session.root.get("readme").content == ""

    def test_root_rejected(self, session):
        with pytest.raises(PathValidationError):
            session.create_file("/")


class TestSessionRoot:
    """Test session construction."""

    def test_custom_root(self):
        root = Folder()
        s = Session(root)
        s.mkdir("a")

        assert s.root is root
        assert root.listing() == "a"

    def test_exists(self, populated_session):
        assert populated_session.exists("/")
        assert populated_session.exists("a/b/c")
        assert not populated_session.exists("a/x")
