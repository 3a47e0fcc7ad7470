"""Cargo build-script directives.

Cargo reads ``cargo:<key>=<value>`` lines from a build script's stdout. Once a
script prints any ``rerun-if-changed`` line, cargo stops watching the whole
package and reruns the script only when one of the printed paths changes.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from omnicopy.env import EnvironmentSnapshot, current_environment
from omnicopy.resolver import MANIFEST_MARKERS, find_project_root

DIRECTIVE_PREFIX = "cargo:"


def format_directive(key: str, value: str) -> str:
    return f"{DIRECTIVE_PREFIX}{key}={value}"


def emit_directive(key: str, value: str, *, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_directive(key, value) + "\n")
    out.flush()


def emit_rerun_if_changed(path: str | os.PathLike[str], *, stream: TextIO | None = None) -> None:
    emit_directive("rerun-if-changed", os.fspath(path), stream=stream)


def emit_rerun_if_env_changed(name: str, *, stream: TextIO | None = None) -> None:
    emit_directive("rerun-if-env-changed", name, stream=stream)


def emit_rerun_if_project_changed(
    *,
    env: EnvironmentSnapshot | None = None,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    stream: TextIO | None = None,
) -> Path:
    """Watch the whole project root again after narrower directives were printed."""
    env = env if env is not None else current_environment()
    root = find_project_root(env.start_dir(), markers=markers)
    emit_rerun_if_changed(root, stream=stream)
    return root


__all__ = [
    "DIRECTIVE_PREFIX",
    "emit_directive",
    "emit_rerun_if_changed",
    "emit_rerun_if_env_changed",
    "emit_rerun_if_project_changed",
    "format_directive",
]
