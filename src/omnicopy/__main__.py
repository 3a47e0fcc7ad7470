"""Command-line entry point for build scripts that are not written in Python.

Usage:
    python -m omnicopy copy res/config.toml res/schemas
    python -m omnicopy where --profile release
    python -m omnicopy rerun-if-changed res
    python -m omnicopy rerun-if-project-changed
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from omnicopy.directives import emit_rerun_if_changed, emit_rerun_if_project_changed
from omnicopy.env import EnvironmentSnapshot
from omnicopy.errors import OmnicopyError
from omnicopy.orchestrator import copy_to_output_for_profile
from omnicopy.resolver import resolve_output_root


def cmd_copy(args: argparse.Namespace, env: EnvironmentSnapshot) -> None:
    profile = args.profile if args.profile is not None else env.require_profile()
    for source in args.sources:
        copy_to_output_for_profile(source, profile, env=env, match=args.match)


def cmd_where(args: argparse.Namespace, env: EnvironmentSnapshot) -> None:
    profile = args.profile if args.profile is not None else env.require_profile()
    print(resolve_output_root(profile, env, match=args.match))


def cmd_rerun_if_changed(args: argparse.Namespace, env: EnvironmentSnapshot) -> None:
    for path in args.paths:
        emit_rerun_if_changed(path)


def cmd_rerun_if_project_changed(args: argparse.Namespace, env: EnvironmentSnapshot) -> None:
    emit_rerun_if_project_changed(env=env)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omnicopy",
        description="Copy resources into the cargo output directory",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    copy_p = sub.add_parser("copy", help="Copy files or directories into the output directory")
    copy_p.add_argument("sources", nargs="+")
    copy_p.set_defaults(handler=cmd_copy)

    where_p = sub.add_parser("where", help="Print the resolved output directory")
    where_p.set_defaults(handler=cmd_where)

    for p in (copy_p, where_p):
        p.add_argument("--profile", default=None, help="Profile name (default: $PROFILE)")
        p.add_argument(
            "--match",
            choices=("segment", "substring"),
            default="segment",
            help="How OUT_DIR is searched for <triple>/<profile>",
        )

    changed_p = sub.add_parser("rerun-if-changed", help="Emit cargo:rerun-if-changed lines")
    changed_p.add_argument("paths", nargs="+")
    changed_p.set_defaults(handler=cmd_rerun_if_changed)

    project_p = sub.add_parser(
        "rerun-if-project-changed",
        help="Emit cargo:rerun-if-changed for the project root",
    )
    project_p.set_defaults(handler=cmd_rerun_if_project_changed)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.handler(args, EnvironmentSnapshot.capture())
    except OmnicopyError as exc:
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
