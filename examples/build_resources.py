"""Bin-place resource files from a build step.

Run by a cargo build script (``build.rs``) via ``Command::new("python3")``, or
from any wrapper that exports the variables cargo gives build scripts.
"""

from __future__ import annotations

import sys

from omnicopy import (
    OmnicopyError,
    copy_to_output,
    emit_rerun_if_changed,
    emit_rerun_if_env_changed,
)

RESOURCES = ("res/schemas", "res/config.toml")


def main() -> int:
    try:
        for resource in RESOURCES:
            copy_to_output(resource)
            emit_rerun_if_changed(resource)
    except OmnicopyError as exc:
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 1
    emit_rerun_if_env_changed("CARGO_TARGET_DIR")
    return 0


if __name__ == "__main__":
    sys.exit(main())
