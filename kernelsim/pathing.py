"""Path helpers for the contents emulator. Contents paths are always relative posix paths."""

from pathlib import PurePosixPath


def ensure_relative_path(path: str) -> str:
    """Map "/a/b" and "a/b" to the same contents path "a/b", and "." or "/" to the root ""."""
    if (pure_path := PurePosixPath(path)).is_absolute():
        pure_path = pure_path.relative_to("/")
    relative = str(pure_path)
    return "" if relative == "." else relative


def join_path(*parts: str) -> str:
    parts = [part for part in parts if part]
    if not parts:
        return ""
    return ensure_relative_path(str(PurePosixPath(*parts)))


def basename(path: str) -> str:
    return PurePosixPath(path).name
