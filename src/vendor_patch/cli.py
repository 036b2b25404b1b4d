import argparse
from pathlib import Path

from vendor_patch.__about__ import __version__
from vendor_patch.apply_patch import check_patch_status, reconcile
from vendor_patch.config import DEFAULT_DEPENDENCIES, build_targets
from vendor_patch.engines import ENGINES, get_engine
from vendor_patch.utils.logger import PatchLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vendor-patch",
        description="Apply tracked patches to vendored dependencies",
    )
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="Project root (default: current directory)")
    parser.add_argument(
        "--dependency",
        action="append",
        dest="dependencies",
        metavar="NAME",
        help=f"Dependency to patch, repeatable (default: {', '.join(DEFAULT_DEPENDENCIES)})",
    )
    parser.add_argument("--engine", choices=sorted(ENGINES), default="git", help="Diff-apply engine")
    parser.add_argument("--check", action="store_true", help="Report patch status without applying")
    parser.add_argument("--quiet", action="store_true", help="Only print warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        targets = build_targets(args.root, args.dependencies or DEFAULT_DEPENDENCIES)
    except ValueError as e:
        parser.error(str(e))

    logger = PatchLogger(verbose=not args.quiet)
    engine = get_engine(args.engine)

    if args.check:
        check_patch_status(targets, engine=engine, logger=logger)
    else:
        reconcile(targets, engine=engine, logger=logger)

    # Patch outcomes never fail the build
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
