"""Cross-reference decorator usage against module definitions."""

from typing import Dict, Iterable, List, Optional, Set

from .records import CrossModuleIssue, DiscoveryReport, ExtractionRecord, OwningScope


def build_scopes(records: Iterable[ExtractionRecord]) -> Dict[str, OwningScope]:
    """Map each directory holding a module registration to its scope.

    A directory's available names are the union of the names defined by
    every registering file in it.
    """
    files: Dict[str, List[str]] = {}
    names: Dict[str, Set[str]] = {}
    for record in records:
        if not record.defined_names:
            continue
        files.setdefault(record.directory, []).append(record.file_path)
        names.setdefault(record.directory, set()).update(record.defined_names)

    return {
        directory: OwningScope(
            directory=directory,
            definition_files=tuple(files[directory]),
            available_names=frozenset(names[directory]),
        )
        for directory in files
    }


def approximate_owning_scope(
    record: ExtractionRecord, scopes: Dict[str, OwningScope]
) -> Optional[OwningScope]:
    """Guess which module registration a file falls under.

    Uses filesystem proximity (same directory) as a stand-in for the host
    framework's dependency-injection graph, which cannot be seen from
    source text. Only used for diagnostics; generated code never depends
    on it.
    """
    return scopes.get(record.directory)


def find_issues(
    records: Iterable[ExtractionRecord],
    scopes: Dict[str, OwningScope],
    defined_names: Set[str],
) -> List[CrossModuleIssue]:
    """Flag files using names their owning scope does not provide.

    A file without an owning scope is checked against every defined name.
    """
    issues: List[CrossModuleIssue] = []
    for record in records:
        if not record.used_names:
            continue

        scope = approximate_owning_scope(record, scopes)
        available = scope.available_names if scope else frozenset()
        reference = available if scope else defined_names
        unavailable = frozenset(n for n in record.used_names if n not in reference)

        if unavailable:
            issues.append(
                CrossModuleIssue(
                    file=record.file_path,
                    owning_scope=scope,
                    available_names=available,
                    used_names=record.used_names,
                    unavailable_names=unavailable,
                )
            )
    return issues


def analyze(records: List[ExtractionRecord]) -> DiscoveryReport:
    """Aggregate per-file records into a discovery report.

    Args:
        records: Extraction records from one scan

    Returns:
        DiscoveryReport with name sets, scopes and cross-module issues
    """
    used: Set[str] = set()
    defined: Set[str] = set()
    for record in records:
        used.update(record.used_names)
        defined.update(record.defined_names)

    scopes = build_scopes(records)

    return DiscoveryReport(
        records=list(records),
        total_names=tuple(sorted(used | defined)),
        used_names=frozenset(used),
        defined_names=frozenset(defined),
        used_only=frozenset(used - defined),
        defined_only=frozenset(defined - used),
        reconciled=frozenset(used & defined),
        scopes=list(scopes.values()),
        issues=find_issues(records, scopes, defined),
    )
