"""
Shared test fixtures and utilities for the memshell test suite.
"""

import pytest

from memshell.session import Session


@pytest.fixture
def session():
    """Fresh session with an empty root folder."""
    return Session()


@pytest.fixture
def populated_session():
    """Session holding a small tree.

    Layout:
        /a/b/c
        /a/notes.txt
        /docs
        /readme (file)
    """
    s = Session()
    s.mkdir("a/b/c")
    s.mkdir("docs")
    s.create_file("a/notes.txt", "hello")
    s.create_file("readme")
    return s
