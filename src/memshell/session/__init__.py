"""
Session state for memshell.

This package holds the root folder and working path and exposes the
operations the command interpreter dispatches to.
"""

from memshell.session.filesystem import Session

__all__ = ["Session"]
