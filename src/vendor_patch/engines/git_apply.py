"""git apply engine.

Runs ``git -C <tree> apply`` against a dependency checkout. Patch paths are
resolved to absolute paths because git changes directory before reading them.
"""

from pathlib import Path

from vendor_patch.base_engine import CommandApplyEngine


class GitApplyEngine(CommandApplyEngine):
    """Diff-apply engine backed by ``git apply``."""

    name = "git"

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def build_command(self, tree: Path, patch: Path, *, dry_run: bool, reverse: bool) -> list[str]:
        cmd = [self.git, "-C", str(tree), "apply"]
        if reverse:
            cmd.append("--reverse")
        if dry_run:
            cmd.append("--check")
        cmd.append(str(Path(patch).resolve()))
        return cmd
