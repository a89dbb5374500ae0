"""File scanner for finding source files to extract names from."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Set, Tuple


@dataclass(frozen=True)
class ScanSettings:
    """Which files and directories the scanner visits."""

    source_suffix: str = ".py"
    declaration_suffix: str = ".pyi"
    dependency_dir: str = "site-packages"
    hidden_prefix: str = "."


DEFAULT_SETTINGS = ScanSettings()


def is_excluded_dir(name: str, settings: ScanSettings = DEFAULT_SETTINGS) -> bool:
    """Check if a directory should not be descended into."""
    return name.startswith(settings.hidden_prefix) or name == settings.dependency_dir


def is_source_file(name: str, settings: ScanSettings = DEFAULT_SETTINGS) -> bool:
    """Check if a file name is a scannable source file."""
    return name.endswith(settings.source_suffix) and not name.endswith(
        settings.declaration_suffix
    )


def find_source_files(
    root_dir: Path,
    settings: ScanSettings = DEFAULT_SETTINGS,
    onerror: Optional[Callable[[Path, OSError], None]] = None,
) -> List[Path]:
    """Find all source files under a directory.

    Entries are visited in name order, depth first, so the result is
    stable across runs. Symlinked directories are followed, but a
    directory already visited is not entered again.

    Args:
        root_dir: Directory to scan
        settings: Suffix and directory exclusion rules
        onerror: Called with the directory and error when a directory
            cannot be listed; the walk then continues. Without it the
            error is raised.

    Returns:
        List of source file paths
    """
    if not root_dir or not root_dir.is_dir():
        return []

    files: List[Path] = []
    _walk(root_dir, settings, onerror, set(), files)
    return files


def _walk(
    directory: Path,
    settings: ScanSettings,
    onerror: Optional[Callable[[Path, OSError], None]],
    visited: Set[Tuple[int, int]],
    files: List[Path],
) -> None:
    try:
        stat = directory.stat()
        # Symlink cycles
        key = (stat.st_dev, stat.st_ino)
        if key in visited:
            return
        visited.add(key)

        with os.scandir(directory) as entries:
            items = sorted(entries, key=lambda entry: entry.name)
    except OSError as e:
        if onerror is None:
            raise
        onerror(directory, e)
        return

    for entry in items:
        path = Path(entry.path)
        if entry.is_dir():
            if not is_excluded_dir(entry.name, settings):
                _walk(path, settings, onerror, visited, files)
        elif is_source_file(entry.name, settings):
            files.append(path)
