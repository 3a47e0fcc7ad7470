"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path


class ErrorCode(StrEnum):
    """Stable error identifiers used across the public operations."""

    ENV_MISSING = "E_ENV_MISSING"
    PROJECT_ROOT = "E_PROJECT_ROOT"
    PATH_ENCODING = "E_PATH_ENCODING"
    COPY = "E_COPY"


class OmnicopyError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    @property
    def message(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        # empty values are shown quoted; an empty PROFILE or marker list is still a real input
        parts = [self.message]
        parts.extend(f"  {k}: {v if v else repr(v)}" for k, v in self.context.items())
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class EnvironmentVariableMissingError(OmnicopyError):
    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Required environment variable `{name}` is not set.",
            code=ErrorCode.ENV_MISSING,
            hint=hint or "Run from a cargo build script, or pass the value explicitly.",
            context={"variable": name},
        )
        self.name = name


class ProjectRootNotFoundError(OmnicopyError):
    def __init__(self, start: str | Path, *, markers: tuple[str, ...] = ()) -> None:
        super().__init__(
            "Could not locate the project root.",
            code=ErrorCode.PROJECT_ROOT,
            hint="Set CARGO_TARGET_DIR or run inside a cargo project that has been built once.",
            context={"start": str(start), "markers": ", ".join(markers)},
        )
        self.start = Path(start)


class InvalidPathEncodingError(OmnicopyError):
    def __init__(self, path: object) -> None:
        super().__init__(
            "Could not convert file path to string.",
            code=ErrorCode.PATH_ENCODING,
            context={"path": repr(path)},
        )


class CopyFailedError(OmnicopyError):
    def __init__(self, cause: OSError, *, source: str | Path, destination: str | Path) -> None:
        super().__init__(
            f"Copy failed: {cause}",
            code=ErrorCode.COPY,
            context={"source": str(source), "destination": str(destination)},
        )
        self.cause = cause


__all__ = [
    "CopyFailedError",
    "EnvironmentVariableMissingError",
    "ErrorCode",
    "InvalidPathEncodingError",
    "OmnicopyError",
    "ProjectRootNotFoundError",
]
