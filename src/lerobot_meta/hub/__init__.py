"""Dataset metadata resolution against the artifact host."""

from lerobot_meta.hub.fetcher import MetadataFetcher
from lerobot_meta.hub.resolver import fetch_dataset_info, get_dataset_version, resolve_dataset
from lerobot_meta.hub.urls import build_info_url, build_versioned_url
from lerobot_meta.hub.validator import is_supported_version, validate_version

__all__ = [
    "MetadataFetcher",
    "fetch_dataset_info",
    "get_dataset_version",
    "resolve_dataset",
    "build_info_url",
    "build_versioned_url",
    "is_supported_version",
    "validate_version",
]
