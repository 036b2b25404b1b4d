"""Base class for diff-apply engines.

An engine is the external patch primitive the reconciler is built on. Any
engine offering a forward dry run, a real apply and a reverse dry run can be
substituted.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from vendor_patch.models import EngineResult
from vendor_patch.utils.commands import run_command


class BaseApplyEngine(ABC):
    """Abstract base class for all diff-apply engines.

    Every operation returns an EngineResult. Ordinary failures (patch does not
    apply, executable missing) are reported through the result, never raised.
    """

    name: str = "base"

    @abstractmethod
    def check_apply(self, tree: Path, patch: Path) -> EngineResult:
        """Check whether the patch would apply cleanly to tree, without mutating it."""
        ...

    @abstractmethod
    def apply(self, tree: Path, patch: Path) -> EngineResult:
        """Apply the patch to tree."""
        ...

    @abstractmethod
    def check_reverse_apply(self, tree: Path, patch: Path) -> EngineResult:
        """Check whether the patch would apply cleanly in reverse, without mutating tree.

        A clean reverse check means tree already contains the patch's changes.
        """
        ...


class CommandApplyEngine(BaseApplyEngine):
    """Engine driven by an external command line tool."""

    @abstractmethod
    def build_command(self, tree: Path, patch: Path, *, dry_run: bool, reverse: bool) -> list[str]:
        """Build the command line for one invocation."""
        ...

    def _run(self, tree: Path, patch: Path, *, dry_run: bool, reverse: bool) -> EngineResult:
        result = run_command(self.build_command(tree, patch, dry_run=dry_run, reverse=reverse))
        return EngineResult(success=result.ok, detail=None if result.ok else result.output)

    def check_apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._run(tree, patch, dry_run=True, reverse=False)

    def apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._run(tree, patch, dry_run=False, reverse=False)

    def check_reverse_apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._run(tree, patch, dry_run=True, reverse=True)
