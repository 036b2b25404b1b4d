"""GNU patch engine.

Uses ``patch(1)`` for trees that are not git checkouts. Fuzz is disabled so
the forward and reverse checks are exact, and ``--force`` keeps patch from
guessing that a patch is reversed or prompting for input.
"""

from pathlib import Path

from vendor_patch.base_engine import CommandApplyEngine


class GnuPatchEngine(CommandApplyEngine):
    """Diff-apply engine backed by GNU ``patch``."""

    name = "patch"

    def __init__(self, patch: str = "patch", strip: int = 1) -> None:
        self.patch = patch
        self.strip = strip

    def build_command(self, tree: Path, patch: Path, *, dry_run: bool, reverse: bool) -> list[str]:
        cmd = [
            self.patch,
            "-d",
            str(tree),
            f"-p{self.strip}",
            "--force",
            "--fuzz=0",
            "--no-backup-if-mismatch",
            "--reject-file=-",
            "--silent",
        ]
        if reverse:
            cmd.append("--reverse")
        if dry_run:
            cmd.append("--dry-run")
        cmd.extend(["-i", str(Path(patch).resolve())])
        return cmd
