"""Resolver configuration."""

import os
from dataclasses import dataclass
from typing import Mapping

from lerobot_meta.core.constants import (
    DATASET_URL_ENV,
    DEFAULT_DATASET_URL,
    MAX_ATTEMPTS,
    REQUEST_TIMEOUT_SECONDS,
    RETRY_BACKOFF_SECONDS,
    TOKEN_ENVS,
)


@dataclass(frozen=True)
class HubSettings:
    """Connection settings for the artifact host.

    Passed explicitly to the fetcher; only ``from_env`` reads the process
    environment.
    """

    endpoint: str = DEFAULT_DATASET_URL
    token: str | None = None
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    max_attempts: int = MAX_ATTEMPTS
    retry_backoff_seconds: float = RETRY_BACKOFF_SECONDS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HubSettings":
        """Build settings from DATASET_URL and HF_TOKEN / HUGGINGFACE_TOKEN.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Settings with the public host and no token when unset.
        """
        if environ is None:
            environ = os.environ

        endpoint = environ.get(DATASET_URL_ENV) or DEFAULT_DATASET_URL
        token = next((environ[name] for name in TOKEN_ENVS if environ.get(name)), None)
        return cls(endpoint=endpoint, token=token)

    @property
    def auth_headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}
