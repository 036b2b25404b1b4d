from vendor_patch.__about__ import __version__, __version_tuple__
from vendor_patch.apply_patch import (
    apply_patch_file,
    apply_patches_to_dependency,
    check_patch_status,
    reconcile,
)
from vendor_patch.base_engine import BaseApplyEngine
from vendor_patch.config import build_targets, default_targets
from vendor_patch.engines import GitApplyEngine, GnuPatchEngine, get_engine
from vendor_patch.models import (
    EngineResult,
    PatchOutcome,
    PatchResult,
    PatchStatus,
    PatchTarget,
    RunSummary,
    StatusSummary,
    TargetResult,
    TargetStatus,
)

__all__ = [
    "__version__",
    "__version_tuple__",
    "reconcile",
    "apply_patch_file",
    "apply_patches_to_dependency",
    "check_patch_status",
    "build_targets",
    "default_targets",
    "BaseApplyEngine",
    "GitApplyEngine",
    "GnuPatchEngine",
    "get_engine",
    "EngineResult",
    "PatchOutcome",
    "PatchResult",
    "PatchStatus",
    "PatchTarget",
    "RunSummary",
    "StatusSummary",
    "TargetResult",
    "TargetStatus",
]
