"""Tests for tree scanning."""

import os
from pathlib import Path

import pytest

from selective_throttler.discovery import scan_source, scan_tree
from selective_throttler.discovery.extractors import build_extractors
from selective_throttler.discovery.scanner import ScanSettings, find_source_files


def test_find_source_files_skips_hidden_and_dependency_dirs(tmp_path, write_file):
    """Test hidden dirs, site-packages and stubs are not visited."""
    write_file(tmp_path / "app_module.py", "")
    write_file(tmp_path / "auth" / "auth_module.py", "")
    write_file(tmp_path / "auth" / "auth_controller.py", "")
    write_file(tmp_path / ".venv" / "lib" / "hidden.py", "")
    write_file(tmp_path / "site-packages" / "dep" / "dep.py", "")
    write_file(tmp_path / "stubs.pyi", "")
    write_file(tmp_path / "README.md", "")

    files = find_source_files(tmp_path)

    assert [f.relative_to(tmp_path).as_posix() for f in files] == [
        "app_module.py",
        "auth/auth_controller.py",
        "auth/auth_module.py",
    ]


def test_find_source_files_missing_dir(tmp_path):
    assert find_source_files(tmp_path / "missing") == []


def test_find_source_files_custom_settings(tmp_path, write_file):
    """Test suffixes and the dependency directory are configurable."""
    write_file(tmp_path / "app.module.ts", "")
    write_file(tmp_path / "types.d.ts", "")
    write_file(tmp_path / "node_modules" / "dep.ts", "")

    settings = ScanSettings(
        source_suffix=".ts", declaration_suffix=".d.ts", dependency_dir="node_modules"
    )
    files = find_source_files(tmp_path, settings)

    assert [f.name for f in files] == ["app.module.ts"]


def test_scan_source_returns_none_without_names():
    assert scan_source("print('hello')\n", "hello.py", build_extractors()) is None


def test_scan_tree_builds_records(tmp_path, write_file):
    """Test each file with names becomes one record with a relative path."""
    write_file(
        tmp_path / "app_module.py",
        """
        ThrottlerModule.for_root(
            [
                {"name": "burst", "ttl": 1000, "limit": 3},
                {"name": "sustained", "ttl": 60000, "limit": 100},
            ]
        )
        """,
    )
    write_file(
        tmp_path / "api" / "api_controller.py",
        """
        @single_throttle("burst")
        def index():
            pass
        """,
    )
    write_file(tmp_path / "api" / "util.py", "def helper():\n    return 1\n")

    result = scan_tree(tmp_path)

    assert result.read_errors == []
    assert [r.file_path for r in result.records] == [
        "api/api_controller.py",
        "app_module.py",
    ]
    controller, module = result.records
    assert controller.used_names == {"burst"}
    assert controller.defined_names == frozenset()
    assert controller.directory == "api"
    assert module.defined_names == {"burst", "sustained"}
    assert module.directory == "."


def test_scan_tree_continues_after_read_error(tmp_path, write_file):
    """Test an unreadable file is reported and the scan goes on."""
    (tmp_path / "broken.py").write_bytes(b"\xff\xfe\x00 not utf-8 \xff")
    write_file(tmp_path / "ok.py", '@single_throttle("burst")\ndef f():\n    pass\n')

    result = scan_tree(tmp_path)

    assert [e.file_path for e in result.read_errors] == ["broken.py"]
    assert "Could not read broken.py" in str(result.read_errors[0])
    assert [r.file_path for r in result.records] == ["ok.py"]


def test_scan_tree_empty(tmp_path):
    result = scan_tree(Path(tmp_path))
    assert result.records == []
    assert result.read_errors == []


def test_symlinked_directory_loop_is_visited_once(tmp_path, write_file):
    """Test a symlink back to an ancestor does not recurse forever."""
    write_file(tmp_path / "app.py", '@single_throttle("burst")\ndef f():\n    pass\n')
    (tmp_path / "loop").symlink_to(tmp_path, target_is_directory=True)

    assert find_source_files(tmp_path) == [tmp_path / "app.py"]

    result = scan_tree(tmp_path)
    assert result.read_errors == []
    assert [r.file_path for r in result.records] == ["app.py"]


@pytest.fixture
def locked_dir(tmp_path, monkeypatch):
    """Make listing any directory named 'locked' fail."""
    real_scandir = os.scandir

    def scandir(path):
        if Path(path).name == "locked":
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return tmp_path / "locked"


def test_unlistable_directory_is_reported(tmp_path, write_file, locked_dir):
    """Test a directory that cannot be listed becomes a read error."""
    write_file(locked_dir / "hidden.py", '@single_throttle("ghost")\n')
    write_file(tmp_path / "ok.py", '@single_throttle("burst")\ndef f():\n    pass\n')

    result = scan_tree(tmp_path)

    assert [e.file_path for e in result.read_errors] == ["locked"]
    assert "Permission denied" in str(result.read_errors[0])
    assert [r.file_path for r in result.records] == ["ok.py"]


def test_find_source_files_raises_without_onerror(tmp_path, write_file, locked_dir):
    write_file(locked_dir / "hidden.py", "")

    with pytest.raises(PermissionError):
        find_source_files(tmp_path)
