"""Subprocess helpers for external diff-apply tools."""

from dataclasses import dataclass
from pathlib import Path
import subprocess


@dataclass
class CommandResult:
    """Captured result of an external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str | None:
        """Combined, stripped diagnostic output or None if the command was silent."""
        text = "\n".join(part.strip() for part in (self.stderr, self.stdout) if part.strip())
        return text or None


def run_command(cmd: list[str], cwd: Path | None = None) -> CommandResult:
    """Run a command to completion and capture its output.

    No timeout is imposed. A missing or unlaunchable executable is reported as
    a failed result (returncode 127) instead of raising.

    Args:
        cmd: Command to run as list of strings
        cwd: Working directory for the command

    Returns:
        CommandResult instance
    """
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return CommandResult(args=cmd, returncode=127, stderr=f"{cmd[0]}: {e}")

    return CommandResult(
        args=cmd,
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
