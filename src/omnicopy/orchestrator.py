"""Copy resources into the cargo output directory of the current build."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from omnicopy.copying import CopyRequest
from omnicopy.env import EnvironmentSnapshot, TripleQuery, current_environment
from omnicopy.errors import InvalidPathEncodingError
from omnicopy.observability import StructuredLogger
from omnicopy.resolver import MANIFEST_MARKERS, MatchMode, resolve_output_root


def copy_to_output(
    path: str,
    *,
    env: EnvironmentSnapshot | None = None,
    match: MatchMode = "segment",
    triple_query: TripleQuery | None = None,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    logger: StructuredLogger | None = None,
) -> None:
    """Copy *path* into the output directory of the profile named by ``PROFILE``."""
    env = env if env is not None else current_environment()
    copy_to_output_for_profile(
        path,
        env.require_profile(),
        env=env,
        match=match,
        triple_query=triple_query,
        markers=markers,
        logger=logger,
    )


def copy_to_output_for_profile(
    path: str,
    profile: str,
    *,
    env: EnvironmentSnapshot | None = None,
    match: MatchMode = "segment",
    triple_query: TripleQuery | None = None,
    markers: tuple[str, ...] = MANIFEST_MARKERS,
    logger: StructuredLogger | None = None,
) -> None:
    destination = resolve_output_root(
        profile,
        env,
        match=match,
        triple_query=triple_query,
        markers=markers,
        logger=logger,
    )
    request = CopyRequest(source=Path(path), destination=destination)
    request.execute()
    if logger is not None:
        logger.log(
            operation="copy",
            profile=profile,
            message="Copied into output directory.",
            extra={"source": path, "destination": str(destination)},
        )


def copy_to_output_by_path(
    path: os.PathLike[str] | os.PathLike[bytes] | bytes,
    **options: Any,
) -> None:
    copy_to_output(path_to_str(path), **options)


def copy_to_output_by_path_for_profile(
    path: os.PathLike[str] | os.PathLike[bytes] | bytes,
    profile: str,
    **options: Any,
) -> None:
    copy_to_output_for_profile(path_to_str(path), profile, **options)


def path_to_str(path: os.PathLike[str] | os.PathLike[bytes] | str | bytes) -> str:
    """Return *path* as text, rejecting paths that are not valid UTF-8."""
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPathEncodingError(path) from exc
    try:
        # undecodable bytes surface as lone surrogates under surrogateescape
        raw.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidPathEncodingError(path) from exc
    return raw


__all__ = [
    "copy_to_output",
    "copy_to_output_by_path",
    "copy_to_output_by_path_for_profile",
    "copy_to_output_for_profile",
    "path_to_str",
]
