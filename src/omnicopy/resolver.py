"""Cargo artifact directory resolution.

Cargo lays out build output predictably
(https://doc.rust-lang.org/cargo/guide/build-cache.html):

* ``<root>/target/<profile>`` for host builds (no ``--target``), and
* ``<root>/target/<triple>/<profile>`` when a target was selected.

Build scripts are not told which of the two is in use, so the compile kind
is inferred by looking for ``<triple>/<profile>`` inside ``OUT_DIR``.
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path, PurePath
from typing import Literal

from omnicopy.env import EnvironmentSnapshot, TripleQuery, current_environment, target_triple
from omnicopy.errors import ProjectRootNotFoundError
from omnicopy.observability import StructuredLogger

MatchMode = Literal["segment", "substring"]

TARGET_SEGMENT = "target"
MANIFEST_MARKERS: tuple[str, ...] = ("Cargo.lock",)


class CompileKind(StrEnum):
    HOST = "host"
    TARGET = "target"


class AmbiguousLayoutWarning(UserWarning):
    """Substring matching found the triple/profile pair outside a path boundary."""


@dataclass(frozen=True, slots=True)
class OutputLayout:
    base: Path
    kind: CompileKind
    triple: str
    profile: str

    @property
    def path(self) -> Path:
        if self.kind is CompileKind.TARGET:
            return self.base / self.triple / self.profile
        return self.base / self.profile


def find_project_root(
    start: str | Path,
    *,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    exists: Callable[[Path], bool] = Path.exists,
) -> Path:
    """Return the nearest ancestor of *start* (inclusive) holding one of *markers*.

    ``Cargo.lock`` lives at the workspace root, so members of a workspace
    resolve to the workspace rather than to their own manifest directory.
    """
    origin = Path(start).absolute()
    for candidate in (origin, *origin.parents):
        if any(exists(candidate / marker) for marker in markers):
            return candidate
    raise ProjectRootNotFoundError(origin, markers=markers)


def infer_compile_kind(
    out_dir: str,
    triple: str,
    profile: str,
    *,
    match: MatchMode = "segment",
) -> CompileKind:
    segment_hit = _contains_segments(out_dir, triple, profile)
    if match == "segment":
        return CompileKind.TARGET if segment_hit else CompileKind.HOST
    if match != "substring":
        raise ValueError(f"Unsupported match mode: {match}")

    substring_hit = os.path.join(triple, profile) in out_dir
    if substring_hit and not segment_hit:
        warnings.warn(
            f"`{triple}/{profile}` occurs in OUT_DIR only as part of another path component; "
            "treating the build as a target build.",
            AmbiguousLayoutWarning,
            stacklevel=2,
        )
    return CompileKind.TARGET if substring_hit else CompileKind.HOST


def _contains_segments(out_dir: str, triple: str, profile: str) -> bool:
    parts = PurePath(out_dir).parts
    return any(
        parts[i] == triple and parts[i + 1] == profile for i in range(len(parts) - 1)
    )


def resolve_output_layout(
    profile: str,
    env: EnvironmentSnapshot | None = None,
    *,
    match: MatchMode = "segment",
    triple_query: TripleQuery | None = None,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    logger: StructuredLogger | None = None,
) -> OutputLayout:
    env = env if env is not None else current_environment()

    if env.target_dir is not None:
        base = Path(env.target_dir)
    else:
        base = find_project_root(env.start_dir(), markers=markers) / TARGET_SEGMENT

    out_dir = env.require_out_dir()
    triple = target_triple(env, triple_query)
    kind = infer_compile_kind(out_dir, triple, profile, match=match)

    layout = OutputLayout(base=base, kind=kind, triple=triple, profile=profile)
    if logger is not None:
        logger.log(
            operation="resolve",
            profile=profile,
            message=f"Resolved {kind} output root.",
            extra={
                "base": str(base),
                "kind": str(kind),
                "triple": triple,
                "override": env.target_dir is not None,
                "path": str(layout.path),
            },
        )
    return layout


def resolve_output_root(
    profile: str,
    env: EnvironmentSnapshot | None = None,
    *,
    match: MatchMode = "segment",
    triple_query: TripleQuery | None = None,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    logger: StructuredLogger | None = None,
) -> Path:
    """Return ``<base>[/<triple>]/<profile>`` without checking or creating it."""
    return resolve_output_layout(
        profile,
        env,
        match=match,
        triple_query=triple_query,
        markers=markers,
        logger=logger,
    ).path


__all__ = [
    "MANIFEST_MARKERS",
    "TARGET_SEGMENT",
    "AmbiguousLayoutWarning",
    "CompileKind",
    "MatchMode",
    "OutputLayout",
    "find_project_root",
    "infer_compile_kind",
    "resolve_output_layout",
    "resolve_output_root",
]
