"""Throttler discovery - scan a source tree for throttler names."""

from pathlib import Path
from typing import Optional, Tuple

from .analysis import analyze
from .extractors import DEFAULT_BACKEND, Extractor, build_extractors
from .records import DiscoveryReport, ExtractionRecord, ReadError, ScanResult
from .scanner import DEFAULT_SETTINGS, ScanSettings, find_source_files


def scan_source(
    source: str,
    file_path: str,
    extractors: Tuple[Extractor, Extractor],
) -> Optional[ExtractionRecord]:
    """Run both extractors over one file's text.

    Returns:
        ExtractionRecord, or None if neither extractor found a name
    """
    used_extractor, defined_extractor = extractors
    used = used_extractor.extract(source)
    defined = defined_extractor.extract(source)
    if not used and not defined:
        return None
    return ExtractionRecord(
        file_path=file_path,
        used_names=frozenset(used),
        defined_names=frozenset(defined),
    )


def scan_tree(
    root_dir: Path,
    backend: str = DEFAULT_BACKEND,
    settings: ScanSettings = DEFAULT_SETTINGS,
) -> ScanResult:
    """Scan every source file under ``root_dir``.

    A file or directory that cannot be read is recorded as a ReadError and
    the scan continues with the remaining entries.

    Args:
        root_dir: Directory to scan
        backend: Extraction backend ('heuristic' or 'balanced')
        settings: Suffix and directory exclusion rules

    Returns:
        ScanResult with one record per file that mentions a throttler
    """
    extractors = build_extractors(backend)
    result = ScanResult()

    def record_error(path: Path, error: OSError) -> None:
        relative = path.relative_to(root_dir).as_posix()
        result.read_errors.append(ReadError(file_path=relative, message=str(error)))

    for file_path in find_source_files(root_dir, settings, onerror=record_error):
        relative = file_path.relative_to(root_dir).as_posix()
        try:
            source = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            result.read_errors.append(ReadError(file_path=relative, message=str(e)))
            continue

        record = scan_source(source, relative, extractors)
        if record is not None:
            result.records.append(record)

    return result


def discover(
    root_dir: Path, backend: str = DEFAULT_BACKEND
) -> Tuple[ScanResult, DiscoveryReport]:
    """Scan ``root_dir`` and cross-reference the results."""
    scan = scan_tree(root_dir, backend=backend)
    return scan, analyze(scan.records)


__all__ = [
    "DiscoveryReport",
    "ExtractionRecord",
    "ReadError",
    "ScanResult",
    "analyze",
    "discover",
    "scan_source",
    "scan_tree",
]
