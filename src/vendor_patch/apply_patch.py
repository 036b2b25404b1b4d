"""Apply vendored dependency patches.

This is the main entry point for reconciling the patch sets in
``patches/<name>`` with the dependency checkouts in ``lib/<name>``. Re-running
is safe: patches already present in a checkout are detected with a reverse
check and skipped. Patch failures are reported, never raised.

Quick usage:
    from vendor_patch.apply_patch import reconcile
    from vendor_patch.config import default_targets
    reconcile(default_targets())
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from vendor_patch.base_engine import BaseApplyEngine
from vendor_patch.config import PATCH_SUFFIX
from vendor_patch.models import (
    EngineResult,
    PatchOutcome,
    PatchResult,
    PatchStatus,
    PatchStatusResult,
    PatchTarget,
    RunSummary,
    StatusSummary,
    TargetResult,
    TargetStatus,
    TargetStatusResult,
)
from vendor_patch.utils.logger import (
    ALREADY_APPLIED_MARKER,
    APPLIED_MARKER,
    FAILED_MARKER,
    PatchLogger,
)


def _default_engine() -> BaseApplyEngine:
    from vendor_patch.engines.git_apply import GitApplyEngine

    return GitApplyEngine()


def _probe(operation: Callable[[Path, Path], EngineResult], tree: Path, patch_file: Path) -> EngineResult:
    """Invoke one engine operation, turning an unexpected error into a failed result."""
    try:
        return operation(tree, patch_file)
    except Exception as e:
        return EngineResult(success=False, detail=f"{type(e).__name__}: {e}")


def find_patch_files(patches_dir: Path) -> list[Path]:
    """List the patch files of a patch directory in application order.

    Args:
        patches_dir: Directory containing ``*.patch`` files

    Returns:
        Patch file paths sorted by file name

    Raises:
        OSError: If the directory cannot be read
    """
    return sorted(
        (entry for entry in Path(patches_dir).iterdir() if entry.name.endswith(PATCH_SUFFIX) and entry.is_file()),
        key=lambda entry: entry.name,
    )


def _collect_patch_files(target: PatchTarget, logger: PatchLogger) -> tuple[TargetStatus, list[Path]]:
    """Run the per-target checks that may short-circuit processing.

    Returns:
        Tuple of (status, patch files); the list is empty unless status is PROCESSED
    """
    name = target.dependency_name

    try:
        target_exists = Path(target.target_dir).exists()
    except OSError as e:
        logger.warning(f"Could not access {name} checkout, skipping patches: {e}", force=True)
        return TargetStatus.TARGET_UNREADABLE, []

    if not target_exists:
        logger.notice(f"{name} not found, skipping patches (fetch dependencies first)")
        return TargetStatus.TARGET_MISSING, []

    try:
        if not Path(target.patches_dir).is_dir():
            logger.notice(f"No patches directory found for {name}, skipping")
            return TargetStatus.PATCHES_DIR_MISSING, []

        patch_files = find_patch_files(target.patches_dir)
    except OSError as e:
        logger.warning(f"Could not read patches directory for {name}: {e}", force=True)
        return TargetStatus.PATCHES_DIR_UNREADABLE, []

    if not patch_files:
        logger.notice(f"No patch files found for {name}")
        return TargetStatus.NO_PATCH_FILES, []

    return TargetStatus.PROCESSED, patch_files


def apply_patch_file(
    target: PatchTarget,
    patch_file: Path,
    engine: BaseApplyEngine,
    logger: PatchLogger,
) -> PatchResult:
    """Reconcile a single patch file with the target tree.

    The patch is applied if a dry run succeeds. If the dry run or the real
    apply fails, a reverse dry run decides between already applied and failed.
    Only the real apply mutates the tree.

    The reverse check needs the patch's context lines unchanged in the tree.
    When a later patch of the same set edits lines adjacent to this one, a
    re-run reports this patch as failed even though its changes are present.

    Args:
        target: Target whose tree is patched
        patch_file: Patch file to reconcile
        engine: Diff-apply engine
        logger: Logger for diagnostics

    Returns:
        PatchResult with the outcome
    """
    tree = Path(target.target_dir)
    patch_name = Path(patch_file).name

    def _result(outcome: PatchOutcome, detail: str | None = None) -> PatchResult:
        return PatchResult(
            dependency_name=target.dependency_name,
            patch_name=patch_name,
            patch_path=Path(patch_file),
            outcome=outcome,
            detail=detail,
        )

    check = _probe(engine.check_apply, tree, patch_file)
    if check.success:
        applied = _probe(engine.apply, tree, patch_file)
        if applied.success:
            logger.result(patch_name, APPLIED_MARKER)
            return _result(PatchOutcome.APPLIED)
        failure = applied.detail or "apply failed after a clean check"
    else:
        failure = check.detail

    if _probe(engine.check_reverse_apply, tree, patch_file).success:
        logger.result(patch_name, ALREADY_APPLIED_MARKER, "already applied")
        return _result(PatchOutcome.ALREADY_APPLIED)

    logger.result(patch_name, FAILED_MARKER, "failed or conflicts", force=True)
    with logger.indent():
        logger.warning(f"Warning: Could not apply {patch_name} to {target.dependency_name}", force=True)
        if failure:
            with logger.indent():
                for line in failure.splitlines():
                    logger.debug(line)
    return _result(PatchOutcome.FAILED, failure)


def apply_patches_to_dependency(target: PatchTarget, engine: BaseApplyEngine, logger: PatchLogger) -> TargetResult:
    """Reconcile every patch file of one target, in file name order.

    Each patch is attempted regardless of the outcome of the previous one.

    Returns:
        TargetResult with one PatchResult per attempted patch file
    """
    status, patch_files = _collect_patch_files(target, logger)
    if status is not TargetStatus.PROCESSED:
        return TargetResult(target=target, status=status)

    logger.info(f"Applying {len(patch_files)} patch(es) to {target.dependency_name}...")

    results = []
    with logger.indent():
        for patch_file in patch_files:
            results.append(apply_patch_file(target, patch_file, engine, logger))

    return TargetResult(target=target, status=status, patches=results)


def reconcile(
    targets: Sequence[PatchTarget],
    engine: BaseApplyEngine | None = None,
    verbose: bool = True,
    logger: PatchLogger | None = None,
) -> RunSummary:
    """Apply all patch sets to their dependency checkouts.

    Targets are processed one at a time, in order. A missing checkout, a
    missing or empty patch directory, or a conflicting patch never stops the
    run; the summary only drives the closing message.

    Args:
        targets: Patch targets in processing order (may be empty)
        engine: Diff-apply engine (default: git apply)
        verbose: If True, print detailed status messages
        logger: Logger to use instead of a new one

    Returns:
        RunSummary with every target's results
    """
    engine = engine or _default_engine()
    logger = logger or PatchLogger(verbose=verbose)

    summary = RunSummary()
    for target in targets:
        try:
            target_result = apply_patches_to_dependency(target, engine, logger)
        except Exception as e:
            logger.warning(f"Could not patch {target.dependency_name}: {type(e).__name__}: {e}", force=True)
            target_result = TargetResult(target=target, status=TargetStatus.ERROR)
        summary.targets.append(target_result)

    if summary.has_failures:
        logger.warning(
            f"{summary.failed} patch(es) could not be applied; review the warnings above",
            force=True,
        )
    logger.info("Patch application complete!")

    return summary


def check_patch_file(target: PatchTarget, patch_file: Path, engine: BaseApplyEngine) -> PatchStatus:
    """Determine the state of one patch file without modifying the tree."""
    tree = Path(target.target_dir)
    if _probe(engine.check_apply, tree, patch_file).success:
        return PatchStatus.NOT_APPLIED
    if _probe(engine.check_reverse_apply, tree, patch_file).success:
        return PatchStatus.ALREADY_APPLIED
    return PatchStatus.CONFLICT


_STATUS_LINES = {
    PatchStatus.NOT_APPLIED: ("·", "not applied"),
    PatchStatus.ALREADY_APPLIED: (ALREADY_APPLIED_MARKER, "already applied"),
    PatchStatus.CONFLICT: (FAILED_MARKER, "conflicts"),
}


def check_patch_status(
    targets: Sequence[PatchTarget],
    engine: BaseApplyEngine | None = None,
    verbose: bool = True,
    logger: PatchLogger | None = None,
) -> StatusSummary:
    """Report the state of every patch file without applying anything.

    Args:
        targets: Patch targets in processing order
        engine: Diff-apply engine (default: git apply)
        verbose: If True, print status information
        logger: Logger to use instead of a new one

    Returns:
        StatusSummary with every target's patch states
    """
    engine = engine or _default_engine()
    logger = logger or PatchLogger(verbose=verbose)

    summary = StatusSummary()
    with logger.section("vendor-patch status"):
        for target in targets:
            status, patch_files = _collect_patch_files(target, logger)
            target_result = TargetStatusResult(target=target, status=status)
            summary.targets.append(target_result)
            if status is not TargetStatus.PROCESSED:
                continue

            logger.info(f"{target.dependency_name}: {len(patch_files)} patch(es)")
            with logger.indent():
                for patch_file in patch_files:
                    patch_status = check_patch_file(target, patch_file, engine)
                    marker, note = _STATUS_LINES[patch_status]
                    logger.result(patch_file.name, marker, note, force=patch_status is PatchStatus.CONFLICT)
                    target_result.patches.append(
                        PatchStatusResult(
                            dependency_name=target.dependency_name,
                            patch_name=patch_file.name,
                            patch_path=patch_file,
                            status=patch_status,
                        )
                    )

        logger.info(f"Pending: {summary.pending}, conflicts: {summary.conflicts}")
        if summary.conflicts:
            logger.warning(f"{summary.conflicts} patch(es) conflict with their checkout", force=True)

    return summary
