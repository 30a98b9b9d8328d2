"""Tests for core types, settings and path helpers."""

import dataclasses

import pytest

from lerobot_meta.core.exceptions import (
    AccessDeniedError,
    DatasetResolutionError,
    LeRobotMetaError,
    UnsupportedVersionError,
)
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.core.types import DatasetInfo, FailureKind
from lerobot_meta.utils.paths import normalize_base_path


class TestNormalizeBasePath:
    """Tests for normalize_base_path function."""

    @pytest.mark.parametrize("raw", ["/a/b/", "a/b/", "a/b", "///a/b"])
    def test_forms_agree(self, raw: str) -> None:
        """Should normalize every spelling to one trailing slash."""
        assert normalize_base_path(raw) == "a/b/"

    @pytest.mark.parametrize("raw", ["", None, "/", "///"])
    def test_empty(self, raw) -> None:
        """Should return an empty prefix when nothing is left."""
        assert normalize_base_path(raw) == ""

    @pytest.mark.parametrize("raw", ["", "x", "/x/y/", "a/b/c/"])
    def test_idempotent(self, raw: str) -> None:
        """Should not change an already-normalized prefix."""
        once = normalize_base_path(raw)

        assert normalize_base_path(once) == once


class TestHubSettings:
    """Tests for HubSettings."""

    def test_defaults(self) -> None:
        """Should target the public host unauthenticated."""
        settings = HubSettings.from_env({})

        assert settings.endpoint == "https://huggingface.co/datasets"
        assert settings.token is None
        assert settings.timeout_seconds == 10.0
        assert settings.max_attempts == 2
        assert settings.retry_backoff_seconds == 0.3
        assert settings.auth_headers == {}

    def test_reads_environment(self) -> None:
        """Should read DATASET_URL and HF_TOKEN."""
        settings = HubSettings.from_env({"DATASET_URL": "http://mirror/", "HF_TOKEN": "abc"})

        assert settings.endpoint == "http://mirror"
        assert settings.token == "abc"
        assert settings.auth_headers == {"Authorization": "Bearer abc"}

    def test_huggingface_token_fallback(self) -> None:
        """Should fall back to HUGGINGFACE_TOKEN when HF_TOKEN is empty."""
        settings = HubSettings.from_env({"HF_TOKEN": "", "HUGGINGFACE_TOKEN": "xyz"})

        assert settings.token == "xyz"

    def test_hf_token_wins(self) -> None:
        """Should prefer HF_TOKEN over HUGGINGFACE_TOKEN."""
        settings = HubSettings.from_env({"HF_TOKEN": "first", "HUGGINGFACE_TOKEN": "second"})

        assert settings.token == "first"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read os.environ when no mapping is given."""
        monkeypatch.setenv("DATASET_URL", "http://env-host/datasets")
        monkeypatch.delenv("HF_TOKEN", raising=False)
        monkeypatch.delenv("HUGGINGFACE_TOKEN", raising=False)

        settings = HubSettings.from_env()

        assert settings.endpoint == "http://env-host/datasets"
        assert settings.token is None

    @pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"timeout_seconds": 0}, {"timeout_seconds": -1.0}])
    def test_rejects_invalid_values(self, kwargs: dict) -> None:
        """Should reject settings that make fetching impossible."""
        with pytest.raises(ValueError):
            HubSettings(**kwargs)

    def test_frozen(self) -> None:
        """Should not allow mutation."""
        settings = HubSettings()

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.token = "changed"  # type: ignore[misc]


class TestDatasetInfo:
    """Tests for DatasetInfo."""

    def test_from_dict(self, info_json: dict) -> None:
        """Should map info.json fields."""
        info = DatasetInfo.from_dict(info_json)

        assert info.codebase_version == "v2.1"
        assert info.robot_type == "2d pointer"
        assert info.total_frames == 25650
        assert info.total_tasks == 1
        assert info.fps == 10
        assert info.video_path.startswith("videos/")
        assert info.data_files_size_in_mb is None

    def test_optional_fields_default(self) -> None:
        """Should tolerate a minimal document."""
        info = DatasetInfo.from_dict({"features": {"action": {}}})

        assert info.codebase_version is None
        assert info.robot_type is None
        assert info.total_episodes == 0
        assert dict(info.splits) == {}
        assert info.feature_names == ["action"]

    def test_direct_construction_defaults(self) -> None:
        """Should default splits and raw to empty mappings."""
        info = DatasetInfo(codebase_version="v3.0", features={})

        assert dict(info.splits) == {}
        assert dict(info.raw) == {}
        assert info == DatasetInfo(codebase_version="v3.0", features={})

    @pytest.mark.parametrize("splits", [5, "train", ["train"], None])
    def test_non_mapping_splits(self, splits: object) -> None:
        """Should leave splits empty and keep the original value in raw."""
        info = DatasetInfo.from_dict({"codebase_version": "v2.1", "features": {"a": {}}, "splits": splits})

        assert dict(info.splits) == {}
        assert info.raw["splits"] == splits
        assert info.feature_names == ["a"]

    def test_read_only(self, info_json: dict) -> None:
        """Should not allow mutation of the descriptor or its mappings."""
        info = DatasetInfo.from_dict(info_json)

        with pytest.raises(dataclasses.FrozenInstanceError):
            info.codebase_version = "v3.0"  # type: ignore[misc]
        with pytest.raises(TypeError):
            info.features["new"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            info.raw["codebase_version"] = "v3.0"  # type: ignore[index]

    def test_detached_from_source(self, info_json: dict) -> None:
        """Should not reflect later changes to the source dict."""
        info = DatasetInfo.from_dict(info_json)
        info_json["features"]["late"] = {}
        info_json["codebase_version"] = "v3.0"

        assert "late" not in info.features
        assert info.raw["codebase_version"] == "v2.1"


class TestExceptions:
    """Tests for the failure taxonomy."""

    def test_hierarchy(self) -> None:
        """Should root every failure at LeRobotMetaError."""
        error = AccessDeniedError("org/repo", "http://x", 401)

        assert isinstance(error, DatasetResolutionError)
        assert isinstance(error, LeRobotMetaError)
        assert error.repo_id == "org/repo"

    def test_kind_is_string_enum(self) -> None:
        """Should expose kinds comparable with plain strings."""
        error = UnsupportedVersionError("org/repo", "v1.0")

        assert error.kind == FailureKind.UNSUPPORTED_VERSION
        assert error.kind == "unsupported-version"
        assert error.supported == ("v3.0", "v2.1", "v2.0")
