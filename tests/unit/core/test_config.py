"""Unit tests for core config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from person_lookup.core.config import LookupConfig
from person_lookup.core.errors import PersonLookupConfigError


def test_from_env_uses_default_file_names(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the default data file names."""
    monkeypatch.delenv("PERSON_LOOKUP_EXISTING_PERSONS_FILE", raising=False)
    monkeypatch.delenv("PERSON_LOOKUP_SCRAWL_RESULTS_FILE", raising=False)

    config = LookupConfig.from_env()

    assert (config.existing_persons_file, config.scrawl_results_file) == (
        "existingPersons.json",
        "scrawlResult.json",
    )


def test_from_env_resolves_local_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve a local data root to an absolute path."""
    monkeypatch.setenv("PERSON_LOOKUP_DATA_ROOT", "./.tmp-data")

    config = LookupConfig.from_env()

    assert Path(config.data_root).is_absolute() and config.is_s3 is False


def test_from_env_keeps_s3_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should keep S3 data roots as URIs."""
    monkeypatch.setenv("PERSON_LOOKUP_DATA_ROOT", "s3://people-bucket/exports")

    config = LookupConfig.from_env()

    assert config.is_s3 is True


def test_from_env_raises_for_invalid_s3_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail when the S3 root lacks a prefix."""
    monkeypatch.setenv("PERSON_LOOKUP_DATA_ROOT", "s3://people-bucket")

    with pytest.raises(PersonLookupConfigError):
        LookupConfig.from_env()


def test_from_env_raises_for_path_like_file_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject file names that include directories."""
    monkeypatch.setenv("PERSON_LOOKUP_SCRAWL_RESULTS_FILE", "../secrets/scrawl.json")

    with pytest.raises(PersonLookupConfigError):
        LookupConfig.from_env()


def test_from_env_reads_s3_session_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should expose optional S3 session settings."""
    monkeypatch.setenv("PERSON_LOOKUP_S3_REGION", "ap-southeast-2")
    monkeypatch.setenv("PERSON_LOOKUP_S3_PROFILE", "")

    config = LookupConfig.from_env()

    assert (config.s3_region, config.s3_profile) == ("ap-southeast-2", None)
