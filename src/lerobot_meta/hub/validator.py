"""Codebase version validation."""

from typing import Any, Mapping, Union

from lerobot_meta.core.exceptions import MissingVersionError, UnsupportedVersionError
from lerobot_meta.core.types import SUPPORTED_VERSIONS, DatasetInfo


def is_supported_version(version: str | None) -> bool:
    """Return True if version is exactly one of SUPPORTED_VERSIONS."""
    return version in SUPPORTED_VERSIONS


def validate_version(info: Union[DatasetInfo, Mapping[str, Any]], repo_id: str) -> str:
    """Extract and check the codebase version of a dataset.

    Args:
        info: Descriptor, or the raw info.json object.
        repo_id: Repository identifier, used in error messages.

    Returns:
        The version string, unchanged.

    Raises:
        MissingVersionError: If codebase_version is absent or empty.
        UnsupportedVersionError: If the version is not supported.
    """
    if isinstance(info, DatasetInfo):
        version = info.codebase_version
    else:
        version = info.get("codebase_version")

    if not version:
        raise MissingVersionError(repo_id)

    if not is_supported_version(version):
        raise UnsupportedVersionError(repo_id, str(version))

    return version
