from pathlib import Path

import pytest

from pantheon.errors import NotAbsolutePathError, PathAlreadyExistsError, PathMissingError
from pantheon.paths import strip_query, validate_path


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("/var/lib/myfs", "/var/lib/myfs"),
        ("/var/lib/myfs?sync=true", "/var/lib/myfs"),
        ("/a/b?x=1?y=2", "/a/b"),
        ("/a/b?", "/a/b"),
        ("?only=query", ""),
    ],
)
def test_strip_query_cuts_at_first_question_mark(location: str, expected: str) -> None:
    assert strip_query(location) == expected


def test_existing_path_passes_when_it_must_exist(tmp_path: Path) -> None:
    validate_path(str(tmp_path), must_exist=True)


def test_missing_path_fails_when_it_must_exist(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    with pytest.raises(PathMissingError) as exc_info:
        validate_path(str(missing), must_exist=True)
    assert exc_info.value.path == str(missing)
    assert "does not exist" in str(exc_info.value)


def test_missing_path_passes_when_it_must_not_exist(tmp_path: Path) -> None:
    validate_path(str(tmp_path / "fresh"), must_exist=False)


def test_existing_path_fails_when_it_must_not_exist(tmp_path: Path) -> None:
    existing = tmp_path / "file"
    existing.write_text("x")
    with pytest.raises(PathAlreadyExistsError):
        validate_path(str(existing), must_exist=False)


@pytest.mark.parametrize("must_exist", [True, False])
@pytest.mark.parametrize("create", [True, False])
def test_relative_path_always_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, must_exist: bool, create: bool
) -> None:
    monkeypatch.chdir(tmp_path)
    if create:
        (tmp_path / "meta").mkdir()
    with pytest.raises(NotAbsolutePathError):
        validate_path("meta", must_exist=must_exist)


def test_query_suffix_is_ignored_by_existence_check(tmp_path: Path) -> None:
    meta = tmp_path / "meta"
    meta.mkdir()
    validate_path(strip_query(f"{meta}?x=1"), must_exist=True)
    with pytest.raises(PathAlreadyExistsError):
        validate_path(strip_query(f"{meta}?x=1"), must_exist=False)
