from vendor_patch.base_engine import BaseApplyEngine
from vendor_patch.engines.git_apply import GitApplyEngine
from vendor_patch.engines.gnu_patch import GnuPatchEngine

ENGINES: dict[str, type[BaseApplyEngine]] = {
    GitApplyEngine.name: GitApplyEngine,
    GnuPatchEngine.name: GnuPatchEngine,
}


def get_engine(name: str = "git") -> BaseApplyEngine:
    """Create a diff-apply engine by name ("git" or "patch")."""
    try:
        return ENGINES[name]()
    except KeyError:
        raise ValueError(f"Unknown engine {name!r}, expected one of: {', '.join(sorted(ENGINES))}") from None


__all__ = ["ENGINES", "GitApplyEngine", "GnuPatchEngine", "get_engine"]
