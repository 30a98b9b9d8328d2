"""Custom exceptions for the LeRobot metadata resolver."""

from lerobot_meta.core.types import SUPPORTED_VERSIONS, FailureKind


class LeRobotMetaError(Exception):
    """Base exception for all resolver errors."""

    pass


class DatasetResolutionError(LeRobotMetaError):
    """Resolving a dataset's metadata failed.

    ``kind`` tells callers which failure occurred without inspecting the
    message.
    """

    kind: FailureKind = FailureKind.INCOMPATIBLE_DATASET

    def __init__(self, message: str, repo_id: str | None = None):
        self.repo_id = repo_id
        super().__init__(message)


class AccessDeniedError(DatasetResolutionError):
    """The host answered 401 or 403."""

    kind = FailureKind.ACCESS_DENIED

    def __init__(self, repo_id: str, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"Failed to fetch dataset info: {status_code}. "
            f"The dataset {repo_id} may be private or gated. "
            "If it's private, set an access token via HF_TOKEN env variable. "
            f"URL tried: {url}",
            repo_id,
        )


class FetchFailedError(DatasetResolutionError):
    """The host answered with a non-success status."""

    kind = FailureKind.FETCH_FAILED

    def __init__(self, repo_id: str, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch dataset info: {status_code}", repo_id)


class NetworkFaultError(DatasetResolutionError):
    """Transport failed on every attempt."""

    kind = FailureKind.NETWORK_FAULT

    def __init__(self, repo_id: str, url: str, attempts: int, reason: str):
        self.url = url
        self.attempts = attempts
        super().__init__(
            f"Network error while fetching dataset info for {repo_id} "
            f"after {attempts} attempt(s): {reason}. URL tried: {url}",
            repo_id,
        )


class FetchTimeoutError(DatasetResolutionError):
    """The overall request deadline expired."""

    kind = FailureKind.TIMEOUT

    def __init__(self, repo_id: str, url: str, timeout_seconds: float):
        self.url = url
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Timed out after {timeout_seconds:g}s while fetching dataset info "
            f"for {repo_id}. URL tried: {url}",
            repo_id,
        )


class MalformedDescriptorError(DatasetResolutionError):
    """info.json does not have the expected shape."""

    kind = FailureKind.MALFORMED_DESCRIPTOR


class MissingVersionError(DatasetResolutionError):
    """info.json has no codebase_version."""

    kind = FailureKind.MISSING_VERSION

    def __init__(self, repo_id: str | None = None):
        super().__init__("Dataset info.json does not contain codebase_version", repo_id)


class UnsupportedVersionError(DatasetResolutionError):
    """codebase_version is not one of the supported schema generations."""

    kind = FailureKind.UNSUPPORTED_VERSION

    def __init__(self, repo_id: str, version: str):
        self.version = version
        self.supported = SUPPORTED_VERSIONS
        super().__init__(
            f"Dataset {repo_id} has codebase version {version}, which is not supported. "
            f"This tool only works with dataset versions {', '.join(SUPPORTED_VERSIONS)}. "
            "Please use a compatible dataset version.",
            repo_id,
        )


class IncompatibleDatasetError(DatasetResolutionError):
    """Fallback for unexpected failures while reading dataset information."""

    kind = FailureKind.INCOMPATIBLE_DATASET

    def __init__(self, repo_id: str, detail: str = ""):
        message = (
            f"Dataset {repo_id} is not compatible with this visualizer. "
            "Failed to read dataset information from the main revision."
        )
        if detail:
            message = f"{message} {detail}"
        super().__init__(message, repo_id)
