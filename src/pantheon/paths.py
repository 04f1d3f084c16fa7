"""Path preconditions for meta locations."""

from __future__ import annotations

import os

from pantheon.errors import NotAbsolutePathError, PathAlreadyExistsError, PathMissingError


def strip_query(location: str) -> str:
    """Drop everything from the first ``?`` so only the directory part is checked."""

    path, _, _ = location.partition("?")
    return path


def validate_path(path: str, *, must_exist: bool) -> None:
    """Check that ``path`` is absolute and matches the expected existence state."""

    if not os.path.isabs(path):
        raise NotAbsolutePathError(f"path must be absolute: {path}", path)

    exists = os.path.exists(path)
    if must_exist and not exists:
        raise PathMissingError(f"path does not exist: {path}", path)
    if not must_exist and exists:
        raise PathAlreadyExistsError(f"path already exists: {path}", path)
