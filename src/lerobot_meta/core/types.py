"""Core type definitions."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from lerobot_meta.core.exceptions import DatasetResolutionError


class CodebaseVersion(str, Enum):
    """LeRobot dataset schema generation."""

    V30 = "v3.0"
    V21 = "v2.1"
    V20 = "v2.0"


SUPPORTED_VERSIONS: tuple[str, ...] = tuple(v.value for v in CodebaseVersion)


class FailureKind(str, Enum):
    """Classified cause of a failed resolution."""

    ACCESS_DENIED = "access-denied"
    FETCH_FAILED = "fetch-failed"
    NETWORK_FAULT = "network-fault"
    TIMEOUT = "timeout"
    MALFORMED_DESCRIPTOR = "malformed-descriptor"
    MISSING_VERSION = "missing-version"
    UNSUPPORTED_VERSION = "unsupported-version"
    INCOMPATIBLE_DATASET = "incompatible-dataset"


_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class DatasetInfo:
    """Descriptor parsed from a dataset's meta/info.json.

    Only the fields needed to resolve the version and artifact URLs are
    typed; the full document stays available through ``raw``.
    """

    codebase_version: str | None
    features: Mapping[str, Any]
    robot_type: str | None = None
    total_episodes: int = 0
    total_frames: int = 0
    total_tasks: int = 0
    chunks_size: int | None = None
    data_files_size_in_mb: float | None = None
    video_files_size_in_mb: float | None = None
    fps: float | None = None
    splits: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    data_path: str | None = None
    video_path: str | None = None
    raw: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DatasetInfo":
        """Build a descriptor from a parsed info.json object.

        A ``splits`` value that is not an object is left out of the typed
        field and stays available through ``raw``.
        """
        splits = data.get("splits")
        return cls(
            codebase_version=data.get("codebase_version"),
            features=MappingProxyType(dict(data.get("features") or {})),
            robot_type=data.get("robot_type"),
            total_episodes=data.get("total_episodes", 0),
            total_frames=data.get("total_frames", 0),
            total_tasks=data.get("total_tasks", 0),
            chunks_size=data.get("chunks_size"),
            data_files_size_in_mb=data.get("data_files_size_in_mb"),
            video_files_size_in_mb=data.get("video_files_size_in_mb"),
            fps=data.get("fps"),
            splits=MappingProxyType(dict(splits)) if isinstance(splits, Mapping) else _EMPTY,
            data_path=data.get("data_path"),
            video_path=data.get("video_path"),
            raw=MappingProxyType(dict(data)),
        )

    @property
    def feature_names(self) -> list[str]:
        return list(self.features)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a single resolution call.

    Either ``version`` and ``info`` are set, or ``error`` is.
    """

    version: str | None = None
    info: DatasetInfo | None = None
    error: "DatasetResolutionError | None" = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> FailureKind | None:
        """Failure kind, or None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> tuple[str, DatasetInfo]:
        """Return ``(version, info)`` or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.version, self.info  # type: ignore[return-value]
