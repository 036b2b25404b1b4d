"""Static patch target configuration.

Patches for a dependency live in ``patches/<name>`` and are applied to its
checkout in ``lib/<name>``, both relative to the project root.
"""

from collections.abc import Iterable
from pathlib import Path

from vendor_patch.models import PatchTarget

PATCH_SUFFIX = ".patch"
PATCHES_DIRNAME = "patches"
VENDOR_DIRNAME = "lib"

DEFAULT_DEPENDENCIES: tuple[str, ...] = ("newton-contracts", "wrapped-m-token")


def build_targets(project_root: str | Path, dependencies: Iterable[str]) -> tuple[PatchTarget, ...]:
    """Build the ordered, immutable list of patch targets.

    Args:
        project_root: Directory holding the patches and vendor directories
        dependencies: Dependency names, in processing order

    Returns:
        Tuple of PatchTarget

    Raises:
        ValueError: If a dependency name is empty or listed twice
    """
    root = Path(project_root)
    targets: list[PatchTarget] = []
    seen: set[str] = set()

    for name in dependencies:
        if not name or not name.strip():
            raise ValueError("Dependency name must not be empty")
        if name in seen:
            raise ValueError(f"Dependency {name!r} is configured more than once")
        seen.add(name)
        targets.append(
            PatchTarget(
                dependency_name=name,
                patches_dir=root / PATCHES_DIRNAME / name,
                target_dir=root / VENDOR_DIRNAME / name,
            )
        )

    return tuple(targets)


def default_targets(project_root: str | Path | None = None) -> tuple[PatchTarget, ...]:
    """Targets for the built-in dependency list.

    Args:
        project_root: Project root (default: current working directory)
    """
    return build_targets(project_root if project_root is not None else Path.cwd(), DEFAULT_DEPENDENCIES)
