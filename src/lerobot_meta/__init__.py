"""LeRobot Hub Metadata Resolver.

Fetch and validate LeRobot dataset metadata (v3.0/v2.1/v2.0) and build
artifact URLs.
"""

__version__ = "0.1.0"

from lerobot_meta.core.types import CodebaseVersion, DatasetInfo, FailureKind, ResolutionResult
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.hub import (
    build_versioned_url,
    fetch_dataset_info,
    get_dataset_version,
    resolve_dataset,
)

__all__ = [
    "__version__",
    "CodebaseVersion",
    "DatasetInfo",
    "FailureKind",
    "ResolutionResult",
    "HubSettings",
    "build_versioned_url",
    "fetch_dataset_info",
    "get_dataset_version",
    "resolve_dataset",
]
