"""Data structures for discovery results."""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

GLOBAL_SCOPE_LABEL = "No specific module (global)"


@dataclass(frozen=True)
class ExtractionRecord:
    """Names found in one source file."""

    file_path: str  # POSIX path relative to the scan root
    used_names: FrozenSet[str]  # Referenced by decorator call sites
    defined_names: FrozenSet[str]  # Declared by module registrations

    @property
    def directory(self) -> str:
        """Directory of the file relative to the scan root ('.' at the root)."""
        head, sep, _ = self.file_path.rpartition("/")
        return head if sep else "."


@dataclass(frozen=True)
class ReadError:
    """A source file that could not be read."""

    file_path: str
    message: str

    def __str__(self) -> str:
        return f"Could not read {self.file_path}: {self.message}"


@dataclass
class ScanResult:
    """Records and read failures from one pass over a tree."""

    records: List[ExtractionRecord] = field(default_factory=list)
    read_errors: List[ReadError] = field(default_factory=list)


@dataclass(frozen=True)
class OwningScope:
    """Names considered available to files in one directory.

    Derived from filesystem proximity only; a diagnostic aid.
    """

    directory: str
    definition_files: Tuple[str, ...]
    available_names: FrozenSet[str]


@dataclass(frozen=True)
class CrossModuleIssue:
    """A file using names its owning scope does not provide."""

    file: str
    owning_scope: Optional[OwningScope]  # None for files with no scope
    available_names: FrozenSet[str]
    used_names: FrozenSet[str]
    unavailable_names: FrozenSet[str]

    @property
    def scope_label(self) -> str:
        """Human-readable name of the owning scope."""
        if self.owning_scope is None:
            return GLOBAL_SCOPE_LABEL
        return ", ".join(self.owning_scope.definition_files)


@dataclass
class DiscoveryReport:
    """Aggregate of one discovery run."""

    records: List[ExtractionRecord]
    total_names: Tuple[str, ...]  # Sorted union of used and defined
    used_names: FrozenSet[str]
    defined_names: FrozenSet[str]
    used_only: FrozenSet[str]  # Missing module definitions
    defined_only: FrozenSet[str]  # Unused module definitions
    reconciled: FrozenSet[str]  # Used and defined
    scopes: List[OwningScope]
    issues: List[CrossModuleIssue]

    @property
    def module_records(self) -> List[ExtractionRecord]:
        """Records of files that register throttlers."""
        return [r for r in self.records if r.defined_names]

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
