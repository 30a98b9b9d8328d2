"""Resilient download of a dataset's meta/info.json."""

import asyncio
from typing import Any

import httpx

from lerobot_meta.core.constants import ACCESS_DENIED_STATUSES
from lerobot_meta.core.exceptions import (
    AccessDeniedError,
    DatasetResolutionError,
    FetchFailedError,
    FetchTimeoutError,
    IncompatibleDatasetError,
    MalformedDescriptorError,
    NetworkFaultError,
)
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.core.types import DatasetInfo
from lerobot_meta.hub.urls import build_info_url
from lerobot_meta.utils.logging import get_logger

logger = get_logger("hub.fetcher")


class MetadataFetcher:
    """Fetches dataset descriptors from the artifact host.

    Every call:
    - is bounded by ``settings.timeout_seconds`` across all attempts
    - makes at most ``settings.max_attempts`` sequential attempts, retrying
      only transport faults with a linear backoff
    - never retries timeouts or HTTP error statuses
    - sends a bearer token when one is configured

    Calls share no state, so one fetcher can serve concurrent callers.
    """

    def __init__(
        self,
        settings: HubSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            settings: Host, token and retry settings. Read from the
                environment when omitted.
            client: HTTP client to use. When omitted, a client is opened and
                closed for each call.
        """
        self.settings = settings if settings is not None else HubSettings.from_env()
        self._client = client

    def info_url(self, repo_id: str, base_path: str = "") -> str:
        """Return the meta/info.json URL for a dataset."""
        return build_info_url(repo_id, base_path, endpoint=self.settings.endpoint)

    async def fetch_info(self, repo_id: str, base_path: str = "") -> DatasetInfo:
        """Fetch and shape-check a dataset's meta/info.json.

        Args:
            repo_id: Repository identifier, e.g. "lerobot/pusht".
            base_path: Optional sub-folder of the repository holding the dataset.

        Returns:
            The parsed descriptor. Its version has not been validated yet.

        Raises:
            AccessDeniedError: On HTTP 401/403.
            FetchFailedError: On any other non-success status.
            FetchTimeoutError: When the deadline expires.
            NetworkFaultError: When every attempt failed at the transport level.
            MalformedDescriptorError: When the body is not an info.json object
                with a features mapping.
            IncompatibleDatasetError: For any other unexpected failure.
        """
        url = self.info_url(repo_id, base_path)
        try:
            response = await self._request(repo_id, url)
            return self._parse_response(repo_id, url, response)
        except DatasetResolutionError:
            raise
        except Exception as e:
            logger.warning(f"Unexpected error while fetching {url}: {e!r}")
            raise IncompatibleDatasetError(repo_id, str(e)) from e

    async def _request(self, repo_id: str, url: str) -> httpx.Response:
        """Run the attempt sequence under one deadline."""
        timeout = self.settings.timeout_seconds
        try:
            if self._client is not None:
                return await asyncio.wait_for(
                    self._get_with_retry(self._client, repo_id, url), timeout
                )

            async with httpx.AsyncClient(timeout=timeout) as client:
                return await asyncio.wait_for(
                    self._get_with_retry(client, repo_id, url), timeout
                )
        except asyncio.TimeoutError as e:
            logger.warning(f"Timed out after {timeout:g}s fetching {url}")
            raise FetchTimeoutError(repo_id, url, timeout) from e

    async def _get_with_retry(
        self, client: httpx.AsyncClient, repo_id: str, url: str
    ) -> httpx.Response:
        max_attempts = self.settings.max_attempts
        headers = self.settings.auth_headers
        last_error: httpx.RequestError | None = None

        for attempt in range(1, max_attempts + 1):
            logger.debug(f"GET {url} (attempt {attempt}/{max_attempts})")
            try:
                return await client.get(
                    url,
                    headers=headers,
                    timeout=self.settings.timeout_seconds,
                    follow_redirects=True,
                )
            except httpx.TimeoutException as e:
                logger.warning(f"Request to {url} timed out")
                raise FetchTimeoutError(repo_id, url, self.settings.timeout_seconds) from e
            except httpx.RequestError as e:
                last_error = e
                if attempt < max_attempts:
                    delay = self.settings.retry_backoff_seconds * attempt
                    logger.warning(f"Request to {url} failed ({e!r}), retrying in {delay:.1f}s")
                    await asyncio.sleep(delay)

        logger.warning(f"Giving up on {url} after {max_attempts} attempt(s): {last_error!r}")
        reason = str(last_error) or type(last_error).__name__
        raise NetworkFaultError(repo_id, url, max_attempts, reason) from last_error

    def _parse_response(self, repo_id: str, url: str, response: httpx.Response) -> DatasetInfo:
        """Classify the HTTP status and parse the body."""
        status = response.status_code
        if status in ACCESS_DENIED_STATUSES:
            logger.warning(f"Access denied ({status}) for {url}")
            raise AccessDeniedError(repo_id, url, status)

        if not response.is_success:
            logger.warning(f"Fetching {url} returned {status}")
            raise FetchFailedError(repo_id, url, status)

        try:
            data: Any = response.json()
        except ValueError as e:
            raise MalformedDescriptorError(
                f"Dataset info.json for {repo_id} is not valid JSON", repo_id
            ) from e

        if not isinstance(data, dict) or not isinstance(data.get("features"), dict):
            raise MalformedDescriptorError(
                "Dataset info.json does not have the expected features structure", repo_id
            )

        return DatasetInfo.from_dict(data)
