from __future__ import annotations

"""
Unit tests for the single-generation rotation check.

Verifies:
1. Strict greater-than threshold comparison.
2. Backup replacement (never appended to).
3. No-op behavior for a missing or small active file.
4. Error propagation when the filesystem refuses the move.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from applog.domain.errors import RotationError
from applog.infra.fs import get_backup_path, get_log_path
from applog.infra.rotation import rotate_if_oversized


def _write(path: Path, size: int, fill: bytes = b"x") -> None:
    path.write_bytes(fill * size)


def test_fixed_file_names(tmp_path: Path) -> None:
    assert Path(get_log_path(tmp_path)) == tmp_path / "app.log"
    assert Path(get_backup_path(tmp_path)) == tmp_path / "app.log.old"


def test_missing_active_file_is_noop(tmp_path: Path) -> None:
    assert rotate_if_oversized(tmp_path, 0) is False
    assert list(tmp_path.iterdir()) == []


def test_file_at_threshold_is_kept(tmp_path: Path) -> None:
    active = tmp_path / "app.log"
    _write(active, 100)

    assert rotate_if_oversized(tmp_path, 100) is False
    assert active.stat().st_size == 100
    assert not (tmp_path / "app.log.old").exists()


def test_file_one_byte_over_threshold_rotates(tmp_path: Path) -> None:
    active = tmp_path / "app.log"
    _write(active, 101)

    assert rotate_if_oversized(tmp_path, 100) is True
    assert not active.exists()
    assert (tmp_path / "app.log.old").read_bytes() == b"x" * 101


def test_existing_backup_is_replaced(tmp_path: Path) -> None:
    backup = tmp_path / "app.log.old"
    _write(backup, 500, b"o")
    _write(tmp_path / "app.log", 20, b"n")

    assert rotate_if_oversized(tmp_path, 10) is True
    assert backup.read_bytes() == b"n" * 20


def test_fresh_empty_file_does_not_rotate_again(tmp_path: Path) -> None:
    _write(tmp_path / "app.log", 64)
    assert rotate_if_oversized(tmp_path, 32) is True

    (tmp_path / "app.log").touch()
    assert rotate_if_oversized(tmp_path, 0) is False
    assert (tmp_path / "app.log.old").stat().st_size == 64


def test_zero_threshold_rotates_any_content(tmp_path: Path) -> None:
    _write(tmp_path / "app.log", 1)
    assert rotate_if_oversized(tmp_path, 0) is True


def test_size_is_read_at_check_time(tmp_path: Path) -> None:
    active = tmp_path / "app.log"
    _write(active, 10)
    assert rotate_if_oversized(tmp_path, 10) is False

    with open(active, "ab") as f:
        f.write(b"y")
    assert rotate_if_oversized(tmp_path, 10) is True


def test_rename_failure_raises_rotation_error(tmp_path: Path) -> None:
    _write(tmp_path / "app.log", 50)

    with patch("applog.infra.rotation.os.rename", side_effect=PermissionError("denied")):
        with pytest.raises(RotationError) as exc_info:
            rotate_if_oversized(tmp_path, 10)

    assert isinstance(exc_info.value.__cause__, PermissionError)
    assert exc_info.value.path == str(tmp_path / "app.log")
    assert (tmp_path / "app.log").exists()


def test_backup_removal_failure_raises_rotation_error(tmp_path: Path) -> None:
    _write(tmp_path / "app.log", 50)
    _write(tmp_path / "app.log.old", 5)

    with patch("applog.infra.rotation.os.remove", side_effect=OSError("busy")):
        with pytest.raises(RotationError):
            rotate_if_oversized(tmp_path, 10)

    assert (tmp_path / "app.log").stat().st_size == 50
    assert (tmp_path / "app.log.old").stat().st_size == 5


def test_unusable_path_raises_rotation_error(tmp_path: Path) -> None:
    with pytest.raises(RotationError):
        rotate_if_oversized(f"{tmp_path}/bad\0dir", 0)
