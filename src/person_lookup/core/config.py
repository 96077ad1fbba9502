"""Runtime configuration model for person lookup.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path, PurePath

from person_lookup.core.constants import (
    DEFAULT_CACHE_DIR,
    DEFAULT_DATA_ROOT,
    ENV_CACHE_DIR,
    ENV_DATA_ROOT,
    ENV_EXISTING_PERSONS_FILE,
    ENV_S3_PROFILE,
    ENV_S3_REGION,
    ENV_SCRAWL_RESULTS_FILE,
    EXISTING_PERSONS_FILE_NAME,
    S3_URI_SCHEME,
    SCRAWL_RESULTS_FILE_NAME,
)
from person_lookup.core.errors import PersonLookupConfigError
from person_lookup.core.s3_uri import parse_s3_uri


@dataclass(frozen=True)
class LookupConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local data directory or ``s3://bucket/prefix`` URI.
        existing_persons_file: Logical name of the existing persons file.
        scrawl_results_file: Logical name of the scrawl results file.
        cache_dir: Local directory for files downloaded from S3.
        s3_region: Optional default AWS region for S3 operations.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    data_root: str
    existing_persons_file: str = EXISTING_PERSONS_FILE_NAME
    scrawl_results_file: str = SCRAWL_RESULTS_FILE_NAME
    cache_dir: Path = DEFAULT_CACHE_DIR
    s3_region: str | None = None
    s3_profile: str | None = None

    @property
    def is_s3(self) -> bool:
        """Return whether the data root points at an S3 prefix."""
        return self.data_root.startswith(S3_URI_SCHEME)

    @classmethod
    def from_env(cls) -> "LookupConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PersonLookupConfigError: If environment values are invalid.
        """
        data_root = _parse_data_root(os.getenv(ENV_DATA_ROOT, str(DEFAULT_DATA_ROOT)))
        existing_persons_file = _parse_file_name(
            ENV_EXISTING_PERSONS_FILE,
            os.getenv(ENV_EXISTING_PERSONS_FILE, EXISTING_PERSONS_FILE_NAME),
        )
        scrawl_results_file = _parse_file_name(
            ENV_SCRAWL_RESULTS_FILE,
            os.getenv(ENV_SCRAWL_RESULTS_FILE, SCRAWL_RESULTS_FILE_NAME),
        )
        cache_dir_value = os.getenv(ENV_CACHE_DIR, str(DEFAULT_CACHE_DIR))
        return cls(
            data_root=data_root,
            existing_persons_file=existing_persons_file,
            scrawl_results_file=scrawl_results_file,
            cache_dir=Path(cache_dir_value).expanduser().resolve(),
            s3_region=os.getenv(ENV_S3_REGION) or None,
            s3_profile=os.getenv(ENV_S3_PROFILE) or None,
        )


def _parse_data_root(raw_value: str) -> str:
    """Validate the data root environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        S3 URI unchanged, or an absolute local directory path.

    Raises:
        PersonLookupConfigError: If the value is empty or an invalid S3 URI.
    """
    value = raw_value.strip()
    if not value:
        raise PersonLookupConfigError(
            f"Invalid {ENV_DATA_ROOT} value: expected a directory or s3:// URI, "
            "got an empty string. Unset it to use the default App_Data folder."
        )
    if value.startswith(S3_URI_SCHEME):
        parse_s3_uri(value)
        return value
    return str(Path(value).expanduser().resolve())


def _parse_file_name(env_key: str, raw_value: str) -> str:
    """Validate a logical data file name.

    Args:
        env_key: Environment variable the value came from.
        raw_value: Raw string from environment.

    Returns:
        The stripped file name.

    Raises:
        PersonLookupConfigError: If the value is empty or contains a path.
    """
    value = raw_value.strip()
    if not value or len(PurePath(value).parts) != 1 or value in (".", ".."):
        raise PersonLookupConfigError(
            f"Invalid {env_key} value: expected a bare file name, got '{raw_value}'. "
            f"Place the file under {ENV_DATA_ROOT} and set only its name."
        )
    return value
