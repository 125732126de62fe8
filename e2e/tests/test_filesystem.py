"""
Tests for workspace directory helpers
"""

import os

import pytest

from helpers.utils.filesystem import clear_directory, ensure_directory


def test_ensure_directory_creates_missing_directory(tmp_path):
    target = tmp_path / "wallets"

    result = ensure_directory(target)

    assert result == target
    assert target.is_dir()


def test_ensure_directory_is_idempotent(tmp_path):
    target = tmp_path / "wallets"
    ensure_directory(target)
    (target / "keep.txt").write_text("data")

    ensure_directory(str(target))

    assert target.is_dir()
    assert (target / "keep.txt").read_text() == "data"


def test_ensure_directory_does_not_create_parents(tmp_path):
    target = tmp_path / "missing" / "wallets"

    with pytest.raises(FileNotFoundError):
        ensure_directory(target)

    assert not (tmp_path / "missing").exists()


def test_clear_directory_removes_files_and_subdirectories(tmp_path):
    target = tmp_path / "state"
    (target / "db" / "nested").mkdir(parents=True)
    (target / "db" / "nested" / "ledger.bin").write_bytes(b"\x00\x01")
    (target / "node.log").write_text("log")
    (target / ".hidden").write_text("dotfile")

    clear_directory(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_clear_directory_on_empty_directory(tmp_path):
    clear_directory(tmp_path)

    assert tmp_path.is_dir()
    assert list(tmp_path.iterdir()) == []


def test_clear_directory_on_missing_directory_is_noop(tmp_path):
    clear_directory(tmp_path / "missing")

    assert not (tmp_path / "missing").exists()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not available")
def test_clear_directory_does_not_follow_symlinks(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "precious.txt").write_text("keep me")

    target = tmp_path / "state"
    target.mkdir()
    try:
        os.symlink(outside, target / "link-to-outside", target_is_directory=True)
        os.symlink(outside / "precious.txt", target / "link-to-file")
    except OSError:
        pytest.skip("cannot create symlinks on this host")

    clear_directory(target)

    assert list(target.iterdir()) == []
    assert (outside / "precious.txt").read_text() == "keep me"
