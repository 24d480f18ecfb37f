"""Tests for atomic output writing."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path

import pytest

from turnslate import WriteError, write_output


@pytest.fixture
def umask_022() -> Iterator[None]:
    """Run with the common 022 umask, restoring the previous one."""
    previous = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(previous)


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestWriteOutput:
    """File replacement semantics."""

    def test_writes_text(self, tmp_path: Path) -> None:
        target = tmp_path / "langs.ts"
        result = write_output(target, "export {}\n")
        assert result == target.resolve()
        assert target.read_text(encoding="utf-8") == "export {}\n"

    def test_replaces_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "langs.ts"
        target.write_text("old", encoding="utf-8")
        write_output(str(target), "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_newlines_untranslated(self, tmp_path: Path) -> None:
        target = tmp_path / "langs.ts"
        write_output(target, "a\r\nb\n")
        assert target.read_bytes() == b"a\r\nb\n"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(WriteError):
            write_output(tmp_path / "missing" / "langs.ts", "x")

    def test_no_temporary_files_left(self, tmp_path: Path) -> None:
        write_output(tmp_path / "langs.ts", "x")
        assert [p.name for p in tmp_path.iterdir()] == ["langs.ts"]

    def test_destination_is_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "taken"
        target.mkdir()
        with pytest.raises(WriteError):
            write_output(target, "x")
        assert [p.name for p in tmp_path.iterdir()] == ["taken"]

    @pytest.mark.usefixtures("umask_022")
    def test_new_file_honours_umask(self, tmp_path: Path) -> None:
        """A new document is world-readable under a 022 umask."""
        target = tmp_path / "langs.ts"
        write_output(target, "x")
        assert _mode(target) == 0o644

    @pytest.mark.usefixtures("umask_022")
    def test_existing_mode_preserved(self, tmp_path: Path) -> None:
        """Replacing a file keeps its permission bits."""
        target = tmp_path / "langs.ts"
        target.write_text("old", encoding="utf-8")
        target.chmod(0o640)
        write_output(target, "new")
        assert _mode(target) == 0o640
