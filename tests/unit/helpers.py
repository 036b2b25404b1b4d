"""Test helpers: patch contents, dependency checkouts and a scripted engine."""

from dataclasses import dataclass, field
from pathlib import Path
import shutil
import subprocess

import pytest

from vendor_patch.base_engine import BaseApplyEngine
from vendor_patch.models import EngineResult, PatchTarget

HELLO_TXT = "alpha\nbravo\ncharlie\n"
OTHER_TXT = "one\ntwo\nthree\n"

HELLO_PATCH = """\
diff --git a/hello.txt b/hello.txt
--- a/hello.txt
+++ b/hello.txt
@@ -1,3 +1,3 @@
 alpha
-bravo
+bravo patched
 charlie
"""

# Only applies once HELLO_PATCH is in place
DEPENDENT_PATCH = """\
diff --git a/hello.txt b/hello.txt
--- a/hello.txt
+++ b/hello.txt
@@ -1,3 +1,4 @@
 alpha
 bravo patched
+bravo two
 charlie
"""

OTHER_PATCH = """\
diff --git a/other.txt b/other.txt
--- a/other.txt
+++ b/other.txt
@@ -1,3 +1,4 @@
 one
 two
+two and a half
 three
"""

# Targets a line that does not exist in hello.txt
STALE_PATCH = """\
diff --git a/hello.txt b/hello.txt
--- a/hello.txt
+++ b/hello.txt
@@ -1,3 +1,3 @@
 alpha
-delta
+delta patched
 charlie
"""

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
requires_patch = pytest.mark.skipif(shutil.which("patch") is None, reason="patch is not installed")


@dataclass
class ScriptedEngine(BaseApplyEngine):
    """Engine whose answers are scripted per patch file name.

    ``script`` maps a patch name to (check, apply, reverse) booleans; an
    exception instance in place of a boolean is raised instead.
    """

    script: dict[str, tuple] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)

    name = "scripted"

    def _answer(self, operation: str, index: int, patch: Path) -> EngineResult:
        self.calls.append((operation, Path(patch).name))
        answer = self.script.get(Path(patch).name, (True, True, False))[index]
        if isinstance(answer, Exception):
            raise answer
        return EngineResult(success=answer, detail=None if answer else f"{operation} failed")

    def check_apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._answer("check", 0, patch)

    def apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._answer("apply", 1, patch)

    def check_reverse_apply(self, tree: Path, patch: Path) -> EngineResult:
        return self._answer("reverse", 2, patch)


def make_target(root: Path, name: str, patches: dict[str, str] | None = None, tree: bool = True) -> PatchTarget:
    """Create ``patches/<name>`` and ``lib/<name>`` under root.

    Args:
        root: Project root
        name: Dependency name
        patches: Patch file name to content; None leaves out the patches directory
        tree: If False, leave out the dependency checkout
    """
    patches_dir = root / "patches" / name
    target_dir = root / "lib" / name

    if patches is not None:
        patches_dir.mkdir(parents=True)
        for patch_name, content in patches.items():
            (patches_dir / patch_name).write_text(content)

    if tree:
        target_dir.mkdir(parents=True)
        (target_dir / "hello.txt").write_text(HELLO_TXT)
        (target_dir / "other.txt").write_text(OTHER_TXT)
        if shutil.which("git"):
            subprocess.run(["git", "init", "-q", str(target_dir)], check=True, capture_output=True)

    return PatchTarget(dependency_name=name, patches_dir=patches_dir, target_dir=target_dir)


def read_tree(target: PatchTarget) -> dict[str, str]:
    return {name: (target.target_dir / name).read_text() for name in ("hello.txt", "other.txt")}
