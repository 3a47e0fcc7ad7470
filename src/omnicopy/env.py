"""Environment snapshot read by the resolver at call time."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from omnicopy.errors import EnvironmentVariableMissingError

PROFILE = "PROFILE"
TARGET = "TARGET"
OUT_DIR = "OUT_DIR"
CARGO_TARGET_DIR = "CARGO_TARGET_DIR"
RUSTC = "RUSTC"

TripleQuery = Callable[[], str | None]


@dataclass(frozen=True, slots=True)
class EnvironmentSnapshot:
    """Immutable read of the variables cargo hands to a build script.

    ``None`` means the variable was not set. ``cwd`` is the directory the
    project-root search starts from; ``None`` means the process cwd.
    """

    profile: str | None = None
    target: str | None = None
    out_dir: str | None = None
    target_dir: str | None = None
    rustc: str | None = None
    cwd: Path | None = None

    @classmethod
    def capture(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: str | Path | None = None,
    ) -> EnvironmentSnapshot:
        source = os.environ if environ is None else environ
        return cls(
            profile=source.get(PROFILE),
            target=source.get(TARGET),
            out_dir=source.get(OUT_DIR),
            # cargo ignores an empty override, so do we
            target_dir=source.get(CARGO_TARGET_DIR) or None,
            rustc=source.get(RUSTC) or None,
            cwd=Path(cwd) if cwd is not None else None,
        )

    def require_profile(self) -> str:
        return _require(self.profile, PROFILE)

    def require_out_dir(self) -> str:
        return _require(self.out_dir, OUT_DIR)

    def start_dir(self) -> Path:
        return self.cwd if self.cwd is not None else Path.cwd()


def _require(value: str | None, name: str) -> str:
    if value is None:
        raise EnvironmentVariableMissingError(name)
    return value


def current_environment() -> EnvironmentSnapshot:
    return EnvironmentSnapshot.capture()


def rustc_host_triple(rustc: str | None = None) -> str | None:
    """Ask ``rustc -vV`` for its host triple; ``None`` if rustc is unusable."""
    try:
        result = subprocess.run(
            [rustc or "rustc", "-vV"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    for line in result.stdout.splitlines():
        key, _, value = line.partition(":")
        if key.strip() == "host" and value.strip():
            return value.strip()
    return None


def target_triple(env: EnvironmentSnapshot, query: TripleQuery | None = None) -> str:
    """Return the compile target triple.

    ``TARGET`` wins; otherwise the host triple reported by *query* (by default
    the ``rustc`` named by ``RUSTC``) is used.
    """
    if env.target is not None:
        return env.target
    if query is None:
        triple = rustc_host_triple(env.rustc)
    else:
        triple = query()
    if not triple:
        raise EnvironmentVariableMissingError(
            TARGET,
            hint="Run from a cargo build script or make `rustc` available on PATH.",
        )
    return triple


__all__ = [
    "CARGO_TARGET_DIR",
    "OUT_DIR",
    "PROFILE",
    "RUSTC",
    "TARGET",
    "EnvironmentSnapshot",
    "TripleQuery",
    "current_environment",
    "rustc_host_triple",
    "target_triple",
]
