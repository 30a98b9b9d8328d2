"""Pytest fixtures for LeRobot metadata resolver tests."""

import json
import logging
from typing import Any, Callable, Iterator

import httpx
import pytest

from lerobot_meta.core.settings import HubSettings
from lerobot_meta.utils.logging import HTTP_LOGGER, LOGGER_NAMESPACE

HUB = "https://huggingface.co/datasets"


class RecordingHandler:
    """MockTransport handler that replays outcomes and records requests.

    Each outcome is an ``httpx.Response``, an exception to raise, or a
    callable taking the request. The last outcome repeats once exhausted.
    """

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        if callable(outcome):
            return outcome(request)
        return outcome

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by the CLI so they don't outlive a test."""
    yield
    for name in (LOGGER_NAMESPACE, HTTP_LOGGER):
        logger = logging.getLogger(name)
        for log_handler in logger.handlers:
            log_handler.close()
        logger.handlers.clear()
        logger.propagate = True


@pytest.fixture
def hub_url() -> str:
    """Return the public artifact host."""
    return HUB


@pytest.fixture
def settings() -> HubSettings:
    """Settings against the public host with no backoff delay."""
    return HubSettings(endpoint=HUB, retry_backoff_seconds=0.0)


@pytest.fixture
def info_json() -> dict[str, Any]:
    """A v2.1 meta/info.json shaped like lerobot/pusht's."""
    return {
        "codebase_version": "v2.1",
        "robot_type": "2d pointer",
        "total_episodes": 206,
        "total_frames": 25650,
        "total_tasks": 1,
        "chunks_size": 1000,
        "fps": 10,
        "splits": {"train": "0:206"},
        "data_path": "data/chunk-{episode_chunk:03d}/episode_{episode_index:06d}.parquet",
        "video_path": "videos/chunk-{episode_chunk:03d}/{video_key}/episode_{episode_index:06d}.mp4",
        "features": {
            "observation.image": {"dtype": "video", "shape": [96, 96, 3]},
            "observation.state": {"dtype": "float32", "shape": [2]},
            "action": {"dtype": "float32", "shape": [2]},
        },
    }


@pytest.fixture
def handler() -> Callable[..., RecordingHandler]:
    """Return a factory for RecordingHandler."""
    return RecordingHandler


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Return a factory for JSON responses."""

    def factory(payload: Any, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return factory


@pytest.fixture
def make_client() -> Callable[[Any], httpx.AsyncClient]:
    """Return a factory for AsyncClients backed by a MockTransport."""

    def factory(mock_handler: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(mock_handler))

    return factory
