"""Recursive overwrite copy used to bin-place build resources."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from omnicopy.errors import CopyFailedError


@dataclass(frozen=True, slots=True)
class CopyRequest:
    source: Path
    destination: Path
    overwrite: bool = True
    copy_inside: bool = True

    def execute(self) -> None:
        copy_items(
            self.source,
            self.destination,
            overwrite=self.overwrite,
            copy_inside=self.copy_inside,
        )


def copy_items(
    source: str | Path,
    destination: str | Path,
    *,
    overwrite: bool = True,
    copy_inside: bool = True,
) -> None:
    """Copy a file or directory tree into *destination*.

    A directory source with ``copy_inside`` has its contents placed directly in
    *destination*; otherwise it lands at ``destination/<name>``. Files always
    land at ``destination/<name>``. Missing directories are created and empty
    ones are reproduced. Failures are raised as :class:`CopyFailedError` and
    leave whatever was already copied in place.
    """
    source_path = Path(source)
    destination_path = Path(destination)
    copy_file = _replace_file if overwrite else _copy_new_file
    try:
        if source_path.is_dir():
            target = destination_path if copy_inside else destination_path / source_path.name
            shutil.copytree(
                source_path,
                target,
                copy_function=copy_file,
                dirs_exist_ok=True,
            )
        else:
            if not source_path.exists():
                raise FileNotFoundError(2, "No such file or directory", str(source_path))
            destination_path.mkdir(parents=True, exist_ok=True)
            copy_file(str(source_path), str(destination_path / source_path.name))
    except OSError as exc:
        raise CopyFailedError(exc, source=source_path, destination=destination_path) from exc


def _replace_file(src: str, dst: str) -> str:
    # remove first so read-only outputs and stale directories of the same name are replaced
    if os.path.isdir(dst) and not os.path.islink(dst):
        shutil.rmtree(dst)
    elif os.path.lexists(dst):
        os.unlink(dst)
    return shutil.copy2(src, dst)


def _copy_new_file(src: str, dst: str) -> str:
    if os.path.lexists(dst):
        raise FileExistsError(17, "Destination already exists", dst)
    return shutil.copy2(src, dst)


__all__ = ["CopyRequest", "copy_items"]
