"""
Path canonicalization and working-directory resolution.

Paths are POSIX-like strings. Canonicalization is purely lexical: ``.`` and
empty segments are dropped and every ``..`` cancels the nearest preceding
real segment, without consulting the tree. Excess ``..`` at the top are
clamped at the root.
"""

from dataclasses import dataclass

from memshell.core.types import PATH_SEPARATOR, Segments

CURRENT_DIR = "."
PARENT_DIR = ".."


def canonicalize(raw: str) -> Segments:
    """
    Convert a raw path string into its canonical segment sequence.

    Segments are scanned from the end toward the start while counting pending
    ``..`` entries, so a later ``..`` cancels an earlier name.

    Params:
        raw: Relative or absolute path string

    Returns:
        Root-relative list of segments, empty for the root

    Examples:
        "/../../pera/aieie/../asa/../.././miao" -> ["miao"]
        "a/./b//c/" -> ["a", "b", "c"]
        "../.." -> []
    """
    segments: Segments = []
    pending_up = 0
    for segment in reversed(raw.strip().split(PATH_SEPARATOR)):
        if segment in ("", CURRENT_DIR):
            continue
        if segment == PARENT_DIR:
            pending_up += 1
        elif pending_up > 0:
            pending_up -= 1
        else:
            segments.append(segment)
    segments.reverse()
    return segments


def canonicalize_to_string(raw: str) -> str:
    """Canonicalize ``raw`` and join the segments without a leading separator."""
    return PATH_SEPARATOR.join(canonicalize(raw))


def is_absolute(raw: str) -> bool:
    return raw.startswith(PATH_SEPARATOR)


def to_absolute(raw: str, cwd: str) -> str:
    """
    Interpret a path against the current working path.

    Params:
        raw: Path as typed by the user
        cwd: Current working path, stored without leading or trailing separator

    Returns:
        ``raw`` unchanged when it is already absolute, otherwise the canonical
        absolute form of ``cwd/raw`` with a leading separator

    Rules:
        - Absolute paths ignore cwd and are canonicalized later by the navigator
        - An empty path refers to cwd itself
    """
    if is_absolute(raw):
        return raw
    if not raw:
        return PATH_SEPARATOR + canonicalize_to_string(PATH_SEPARATOR + cwd)
    return PATH_SEPARATOR + canonicalize_to_string(
        f"{PATH_SEPARATOR}{cwd}{PATH_SEPARATOR}{raw}"
    )


@dataclass
class ResolvedPath:
    """
    A user path resolved against a working path.

    Params:
        original_path: The path string as supplied
        absolute_path: Result of ``to_absolute`` for the supplied cwd
        segments: Canonical segments of ``absolute_path``
    """

    original_path: str
    absolute_path: str
    segments: Segments

    def __str__(self) -> str:
        """Return the original path string."""
        return self.original_path

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def canonical(self) -> str:
        """Canonical form without leading separator, as stored for cwd."""
        return PATH_SEPARATOR.join(self.segments)

    @property
    def parent_segments(self) -> Segments:
        return self.segments[:-1]

    @property
    def name(self) -> str:
        """Last segment, or an empty string for the root."""
        return self.segments[-1] if self.segments else ""


def resolve_path(raw: str, cwd: str) -> ResolvedPath:
    """
    Resolve a user path against ``cwd`` into all its useful forms.

    Params:
        raw: Path as typed by the user
        cwd: Current working path

    Returns:
        ResolvedPath bundling the original, absolute, and canonical forms
    """
    absolute_path = to_absolute(raw, cwd)
    return ResolvedPath(
        original_path=raw,
        absolute_path=absolute_path,
        segments=canonicalize(absolute_path),
    )
