"""Logging utility for vendor-patch.

Writes human-readable diagnostic lines to the standard streams, with context
managers for sections and indentation.
"""

from collections.abc import Generator
from contextlib import contextmanager
import sys
from typing import Any, Self, TextIO

NOTICE_MARKER = "ℹ"
APPLIED_MARKER = "✓"
ALREADY_APPLIED_MARKER = "⊙"
FAILED_MARKER = "✗"


class PatchLogger:
    """Logger for vendor-patch operations with context manager support for sections."""

    def __init__(
        self,
        verbose: bool = True,
        output: TextIO | None = None,
        error_output: TextIO | None = None,
    ) -> None:
        """Initialize the logger.

        Args:
            verbose: If True, output messages. If False, only forced
                messages are written.
            output: Output stream (default: sys.stdout)
            error_output: Stream for warnings and errors (default: sys.stderr)
        """
        self.verbose = verbose
        self.output = output or sys.stdout
        self.error_output = error_output or sys.stderr
        self._indent_level = 0
        self._indent_char = "  "

    def _write(self, message: str, force: bool = False, stream: TextIO | None = None) -> None:
        """Write a message to output.

        Args:
            message: Message to write
            force: If True, write even if verbose=False
            stream: Stream to write to (default: self.output)
        """
        if self.verbose or force:
            indent = self._indent_char * self._indent_level
            print(f"{indent}{message}", file=stream or self.output, flush=True)

    def info(self, message: str) -> None:
        """Log an info message."""
        self._write(message)

    def notice(self, message: str) -> None:
        """Log an informational notice about a skipped step."""
        self._write(f"{NOTICE_MARKER} {message}")

    def warning(self, message: str, force: bool = False) -> None:
        """Log a warning message to the error stream."""
        self._write(message, force=force, stream=self.error_output)

    def debug(self, message: str) -> None:
        """Log a debug message (only if verbose)."""
        if self.verbose:
            self._write(f"  {message}")

    def result(self, label: str, marker: str, note: str | None = None, force: bool = False) -> None:
        """Log the outcome line of a single item, e.g. ``0001-fix.patch... ✓``."""
        suffix = f" ({note})" if note else ""
        self._write(f"{label}... {marker}{suffix}", force=force)

    @contextmanager
    def section(self, title: str, char: str = "=", length: int = 70) -> Generator[Self, Any, None]:
        """Context manager for a section with separator formatting.

        Usage:
            with logger.section("My Section"):
                logger.info("Content here")
        """
        if self.verbose:
            self._write(char * length)
            self._write(title)
            self._write(char * length)

        try:
            yield self
        finally:
            if self.verbose:
                self._write("")  # Blank line after section

    @contextmanager
    def indent(self, levels: int = 1) -> Generator[Self, Any, None]:
        """Context manager to indent output.

        Usage:
            with logger.indent():
                logger.info("Indented content")

        Args:
            levels: Number of indentation levels to add
        """
        self._indent_level += levels
        try:
            yield self
        finally:
            self._indent_level -= levels

