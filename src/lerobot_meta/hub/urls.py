"""Artifact URL construction."""

from lerobot_meta.core.constants import INFO_JSON_PATH, RESOLVE_MAIN
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.utils.paths import normalize_base_path


def _resolve_url(endpoint: str | None, repo_id: str, path: str, base_path: str) -> str:
    if endpoint is None:
        endpoint = HubSettings.from_env().endpoint

    prefix = normalize_base_path(base_path)
    return f"{endpoint.rstrip('/')}/{repo_id}/{RESOLVE_MAIN}/{prefix}{path}"


def build_versioned_url(
    repo_id: str,
    version: str,
    path: str,
    base_path: str = "",
    endpoint: str | None = None,
) -> str:
    """Build the URL of a file inside a dataset repository.

    The URL always points at the main revision:
    ``{endpoint}/{repo_id}/resolve/main/{base_path/}{path}``.

    Args:
        repo_id: Repository identifier, e.g. "lerobot/pusht".
        version: Validated codebase version. All supported versions share
            one URL scheme, so it does not change the result.
        path: File path relative to the dataset root.
        base_path: Optional sub-folder of the repository holding the dataset.
        endpoint: Artifact host. Defaults to the one configured in the
            environment.

    Returns:
        Fully qualified URL.
    """
    return _resolve_url(endpoint, repo_id, path, base_path)


def build_info_url(repo_id: str, base_path: str = "", endpoint: str | None = None) -> str:
    """URL of meta/info.json for a dataset."""
    return _resolve_url(endpoint, repo_id, INFO_JSON_PATH, base_path)
