"""Entry points for resolving a dataset's metadata and version."""

import httpx

from lerobot_meta.core.exceptions import DatasetResolutionError, IncompatibleDatasetError
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.core.types import DatasetInfo, ResolutionResult
from lerobot_meta.hub.fetcher import MetadataFetcher
from lerobot_meta.hub.validator import validate_version
from lerobot_meta.utils.logging import get_logger

logger = get_logger("hub.resolver")


async def fetch_dataset_info(
    repo_id: str,
    base_path: str = "",
    *,
    settings: HubSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> DatasetInfo:
    """Fetch the descriptor of a dataset from the main revision.

    Use this when more than the version is needed (chunking, splits, paths).
    The returned descriptor's version is not validated; prefer
    ``resolve_dataset`` before handing it to rendering code.
    """
    fetcher = MetadataFetcher(settings=settings, client=client)
    return await fetcher.fetch_info(repo_id, base_path)


async def _fetch_and_validate(
    repo_id: str,
    base_path: str,
    settings: HubSettings | None,
    client: httpx.AsyncClient | None,
) -> tuple[str, DatasetInfo]:
    try:
        info = await fetch_dataset_info(repo_id, base_path, settings=settings, client=client)
        version = validate_version(info, repo_id)
    except DatasetResolutionError:
        raise
    except Exception as e:
        raise IncompatibleDatasetError(repo_id, str(e)) from e

    logger.debug(f"Resolved {repo_id} at codebase version {version}")
    return version, info


async def get_dataset_version(
    repo_id: str,
    base_path: str = "",
    *,
    settings: HubSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Read and validate the codebase version of a dataset.

    Args:
        repo_id: Repository identifier, e.g. "lerobot/pusht".
        base_path: Optional sub-folder of the repository holding the dataset.
        settings: Host, token and retry settings. Read from the environment
            when omitted.
        client: Optional HTTP client to reuse.

    Returns:
        One of "v3.0", "v2.1" or "v2.0", exactly as declared.

    Raises:
        DatasetResolutionError: Subclass matching the failure kind.
    """
    version, _ = await _fetch_and_validate(repo_id, base_path, settings, client)
    return version


async def resolve_dataset(
    repo_id: str,
    base_path: str = "",
    *,
    settings: HubSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ResolutionResult:
    """Resolve a dataset without raising resolution failures.

    Returns:
        A result holding the validated version and descriptor, or the
        typed error. Callers branch on ``result.kind``.
    """
    try:
        version, info = await _fetch_and_validate(repo_id, base_path, settings, client)
    except DatasetResolutionError as e:
        logger.info(f"Could not resolve {repo_id}: {e}")
        return ResolutionResult(error=e)

    return ResolutionResult(version=version, info=info)
