"""Data models for vendor-patch results and configuration.

Provides strongly-typed dataclasses for targets and all function return values.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class PatchTarget:
    """A dependency, its patch directory and its checked-out source tree."""

    dependency_name: str
    patches_dir: Path
    target_dir: Path


class PatchOutcome(Enum):
    """Outcome of reconciling a single patch file."""

    APPLIED = "applied"
    ALREADY_APPLIED = "already_applied"
    FAILED = "failed"


class TargetStatus(Enum):
    """How far processing of a single target got."""

    TARGET_MISSING = "target_missing"
    TARGET_UNREADABLE = "target_unreadable"
    PATCHES_DIR_MISSING = "patches_dir_missing"
    PATCHES_DIR_UNREADABLE = "patches_dir_unreadable"
    NO_PATCH_FILES = "no_patch_files"
    PROCESSED = "processed"
    ERROR = "error"


class PatchStatus(Enum):
    """Read-only state of a patch file against its target tree."""

    NOT_APPLIED = "not_applied"
    ALREADY_APPLIED = "already_applied"
    CONFLICT = "conflict"


@dataclass
class EngineResult:
    """Result of a single diff-apply engine invocation."""

    success: bool
    detail: str | None = None


@dataclass
class PatchResult:
    """Outcome of reconciling one patch file."""

    dependency_name: str
    patch_name: str
    patch_path: Path
    outcome: PatchOutcome
    detail: str | None = None


@dataclass
class TargetResult:
    """Results from reconciling all patch files of one target."""

    target: PatchTarget
    status: TargetStatus
    patches: list[PatchResult] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.patches)


@dataclass
class RunSummary:
    """Results from reconciling every configured target."""

    targets: list[TargetResult] = field(default_factory=list)

    @property
    def patches(self) -> list[PatchResult]:
        return [patch for target in self.targets for patch in target.patches]

    @property
    def outcomes(self) -> Counter[PatchOutcome]:
        """Multiset of patch outcomes across all targets."""
        return Counter(patch.outcome for patch in self.patches)

    @property
    def applied(self) -> int:
        return self.outcomes[PatchOutcome.APPLIED]

    @property
    def already_applied(self) -> int:
        return self.outcomes[PatchOutcome.ALREADY_APPLIED]

    @property
    def failed(self) -> int:
        return self.outcomes[PatchOutcome.FAILED]

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    @property
    def skipped_targets(self) -> list[TargetResult]:
        return [target for target in self.targets if target.status is not TargetStatus.PROCESSED]


@dataclass
class PatchStatusResult:
    """Read-only status of one patch file."""

    dependency_name: str
    patch_name: str
    patch_path: Path
    status: PatchStatus


@dataclass
class TargetStatusResult:
    """Read-only status of all patch files of one target."""

    target: PatchTarget
    status: TargetStatus
    patches: list[PatchStatusResult] = field(default_factory=list)


@dataclass
class StatusSummary:
    """Read-only status of every configured target."""

    targets: list[TargetStatusResult] = field(default_factory=list)

    @property
    def statuses(self) -> Counter[PatchStatus]:
        return Counter(patch.status for target in self.targets for patch in target.patches)

    @property
    def pending(self) -> int:
        return self.statuses[PatchStatus.NOT_APPLIED]

    @property
    def conflicts(self) -> int:
        return self.statuses[PatchStatus.CONFLICT]
