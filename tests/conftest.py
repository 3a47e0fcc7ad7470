"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from omnicopy.env import EnvironmentSnapshot

TRIPLE = "x86_64-unknown-linux-gnu"

RESOURCE_FILES = {
    "test.txt": "xyz",
    "test.dat": "\x00\x01data",
    "second.txt": "second",
    "nested/test2.txt": "abc",
    "nested/secondnested.txt": "secondnested",
    "nested/doublenested/test3.txt": "test3",
    "nested/doublenested/seconddoublenested.txt": "seconddoublenested",
}
RESOURCE_EMPTY_DIRS = ("empty", "nested/emptier", "nested/doublenested/emptiest")


def write_resources(root: Path) -> Path:
    for rel, content in RESOURCE_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    for rel in RESOURCE_EMPTY_DIRS:
        (root / rel).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def fake_workspace(tmp_path: Path) -> Path:
    """A cargo workspace with one member crate at ``fake_crate/``."""
    root = tmp_path / "fake_workspace"
    crate = root / "fake_crate"
    crate.mkdir(parents=True)
    (root / "Cargo.toml").write_text('[workspace]\nmembers = ["fake_crate"]\n', encoding="utf-8")
    (root / "Cargo.lock").write_text("version = 3\n", encoding="utf-8")
    (crate / "Cargo.toml").write_text(
        '[package]\nname = "fake_crate"\nversion = "0.1.0"\n',
        encoding="utf-8",
    )
    write_resources(crate / "res")
    return root


@pytest.fixture
def fake_crate(tmp_path: Path) -> Path:
    """A standalone crate with its resources under ``res/``."""
    crate = tmp_path / "fake_crate"
    crate.mkdir()
    (crate / "Cargo.toml").write_text(
        '[package]\nname = "fake_crate"\nversion = "0.1.0"\n',
        encoding="utf-8",
    )
    (crate / "Cargo.lock").write_text("version = 3\n", encoding="utf-8")
    write_resources(crate / "res")
    return crate


def host_out_dir(root: Path, profile: str = "debug") -> str:
    return str(root / "target" / profile / "build" / "fake_crate-0123abcd" / "out")


def target_out_dir(root: Path, profile: str = "debug", triple: str = TRIPLE) -> str:
    return str(root / "target" / triple / profile / "build" / "fake_crate-0123abcd" / "out")


@pytest.fixture
def make_env() -> Callable[..., EnvironmentSnapshot]:
    """Build a snapshot from keyword variables without touching ``os.environ``."""

    def _make(cwd: Path | None = None, **variables: str) -> EnvironmentSnapshot:
        environ = {"TARGET": TRIPLE}
        environ.update(variables)
        return EnvironmentSnapshot.capture(environ, cwd=cwd)

    return _make
