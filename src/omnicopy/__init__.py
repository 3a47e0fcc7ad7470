"""Post-build copy of resources into the cargo output directory."""

from .copying import CopyRequest, copy_items
from .directives import (
    emit_rerun_if_changed,
    emit_rerun_if_env_changed,
    emit_rerun_if_project_changed,
)
from .env import EnvironmentSnapshot
from .errors import (
    CopyFailedError,
    EnvironmentVariableMissingError,
    ErrorCode,
    InvalidPathEncodingError,
    OmnicopyError,
    ProjectRootNotFoundError,
)
from .observability import StructuredLogger
from .orchestrator import (
    copy_to_output,
    copy_to_output_by_path,
    copy_to_output_by_path_for_profile,
    copy_to_output_for_profile,
)
from .resolver import (
    AmbiguousLayoutWarning,
    CompileKind,
    OutputLayout,
    find_project_root,
    resolve_output_layout,
    resolve_output_root,
)

__all__ = [
    "AmbiguousLayoutWarning",
    "CompileKind",
    "CopyFailedError",
    "CopyRequest",
    "EnvironmentSnapshot",
    "EnvironmentVariableMissingError",
    "ErrorCode",
    "InvalidPathEncodingError",
    "OmnicopyError",
    "OutputLayout",
    "ProjectRootNotFoundError",
    "StructuredLogger",
    "copy_items",
    "copy_to_output",
    "copy_to_output_by_path",
    "copy_to_output_by_path_for_profile",
    "copy_to_output_for_profile",
    "emit_rerun_if_changed",
    "emit_rerun_if_env_changed",
    "emit_rerun_if_project_changed",
    "find_project_root",
    "resolve_output_layout",
    "resolve_output_root",
]
