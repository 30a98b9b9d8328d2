"""Core types and utilities."""

from lerobot_meta.core.types import (
    SUPPORTED_VERSIONS,
    CodebaseVersion,
    DatasetInfo,
    FailureKind,
    ResolutionResult,
)
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.core.exceptions import (
    LeRobotMetaError,
    DatasetResolutionError,
    AccessDeniedError,
    FetchFailedError,
    NetworkFaultError,
    FetchTimeoutError,
    MalformedDescriptorError,
    MissingVersionError,
    UnsupportedVersionError,
    IncompatibleDatasetError,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CodebaseVersion",
    "DatasetInfo",
    "FailureKind",
    "ResolutionResult",
    "HubSettings",
    "LeRobotMetaError",
    "DatasetResolutionError",
    "AccessDeniedError",
    "FetchFailedError",
    "NetworkFaultError",
    "FetchTimeoutError",
    "MalformedDescriptorError",
    "MissingVersionError",
    "UnsupportedVersionError",
    "IncompatibleDatasetError",
]
