#!/usr/bin/env python3
"""Postinstall hook: apply tracked patches to vendored dependencies.

Run after fetching dependencies into lib/ (e.g. ``forge install``):

    python scripts/apply_patches.py

Patches already present are skipped, and a patch that no longer applies only
prints a warning. The hook always exits 0 so it never breaks the build.
"""

from pathlib import Path

from vendor_patch.apply_patch import reconcile
from vendor_patch.config import default_targets

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def main() -> int:
    reconcile(default_targets(PROJECT_ROOT))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
