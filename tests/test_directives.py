import io
from pathlib import Path

import pytest

from omnicopy.directives import (
    emit_rerun_if_changed,
    emit_rerun_if_env_changed,
    emit_rerun_if_project_changed,
    format_directive,
)
from omnicopy.env import EnvironmentSnapshot
from omnicopy.errors import ProjectRootNotFoundError


def test_format_directive() -> None:
    assert format_directive("rerun-if-changed", "res") == "cargo:rerun-if-changed=res"


def test_rerun_if_changed_writes_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    emit_rerun_if_changed("/data")

    assert capsys.readouterr().out == "cargo:rerun-if-changed=/data\n"


def test_rerun_if_changed_twice_emits_independent_lines() -> None:
    stream = io.StringIO()

    emit_rerun_if_changed("/data", stream=stream)
    emit_rerun_if_changed("/data", stream=stream)

    assert stream.getvalue().splitlines() == [
        "cargo:rerun-if-changed=/data",
        "cargo:rerun-if-changed=/data",
    ]


def test_rerun_if_changed_accepts_path_objects() -> None:
    stream = io.StringIO()
    emit_rerun_if_changed(Path("res") / "nested", stream=stream)
    assert stream.getvalue() == f"cargo:rerun-if-changed={Path('res') / 'nested'}\n"


def test_rerun_if_env_changed() -> None:
    stream = io.StringIO()
    emit_rerun_if_env_changed("CARGO_TARGET_DIR", stream=stream)
    assert stream.getvalue() == "cargo:rerun-if-env-changed=CARGO_TARGET_DIR\n"


def test_rerun_if_project_changed_emits_workspace_root(fake_workspace: Path) -> None:
    stream = io.StringIO()
    env = EnvironmentSnapshot(cwd=fake_workspace / "fake_crate")

    root = emit_rerun_if_project_changed(env=env, stream=stream)

    assert root == fake_workspace
    assert stream.getvalue() == f"cargo:rerun-if-changed={fake_workspace}\n"


def test_rerun_if_project_changed_without_root_raises(tmp_path: Path) -> None:
    stream = io.StringIO()
    env = EnvironmentSnapshot(cwd=tmp_path)

    with pytest.raises(ProjectRootNotFoundError):
        emit_rerun_if_project_changed(
            env=env,
            markers=("Omnicopy.marker.does-not-exist",),
            stream=stream,
        )
    assert stream.getvalue() == ""
