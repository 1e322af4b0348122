"""Unit tests for owner-only config writes."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from jot.utils.fileops import private_mkdir, write_private_text


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestPrivateMkdir:
    def test_creates_with_700(self, tmp_path: Path) -> None:
        target = tmp_path / "jot"
        private_mkdir(target)
        assert target.is_dir()
        assert _mode(target) == 0o700

    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "jot"
        private_mkdir(target)
        assert _mode(target) == 0o700

    def test_existing_directory_untouched(self, tmp_path: Path) -> None:
        target = tmp_path / "shared"
        target.mkdir()
        target.chmod(0o755)
        private_mkdir(target)
        assert _mode(target) == 0o755


class TestWritePrivateText:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        write_private_text(target, 'path = "~/notes"\n')
        assert target.read_text() == 'path = "~/notes"\n'

    def test_sets_600(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        write_private_text(target, "x")
        assert _mode(target) == 0o600

    def test_tightens_replaced_file(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        target.write_text("old")
        target.chmod(0o644)
        write_private_text(target, "new")
        assert target.read_text() == "new"
        assert _mode(target) == 0o600

    def test_new_parent_is_private(self, tmp_path: Path) -> None:
        target = tmp_path / "cfg" / "config.toml"
        write_private_text(target, "x")
        assert _mode(target.parent) == 0o700

    def test_failed_replace_keeps_original(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "config.toml"
        target.write_text("original")

        def fail_replace(self: Path, other: Path) -> Path:
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", fail_replace)
        with pytest.raises(OSError, match="disk full"):
            write_private_text(target, "should not appear")

        assert target.read_text() == "original"
        # The temp file is cleaned up
        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]
