"""Data file location providers.

This module maps logical data file names to concrete local paths.
Files may live in a local data directory or under an S3 prefix.
"""

from __future__ import annotations

from pathlib import Path
import threading
from typing import Any, Protocol

from person_lookup.core.config import LookupConfig
from person_lookup.core.errors import DataSourceUnavailableError, PersonLookupDependencyError
from person_lookup.core.logging_config import get_logger
from person_lookup.core.s3_uri import S3Location, parse_s3_uri

_LOGGER = get_logger(__name__)


class JsonFileProvider(Protocol):
    """Resolves a logical data file name to a readable local path."""

    def get_data_file_path(self, file_name: str) -> Path:
        """Return the local path of a data file."""
        ...


class DataDirectoryFileProvider:
    """Provider serving files from a local data directory."""

    def __init__(self, data_root: str | Path) -> None:
        """Create a provider rooted at a data directory.

        Args:
            data_root: Directory holding the JSON data files.
        """
        self._data_root = Path(data_root).expanduser().resolve()

    @property
    def data_root(self) -> Path:
        return self._data_root

    def get_data_file_path(self, file_name: str) -> Path:
        """Resolve a file name relative to the data root.

        Args:
            file_name: Logical data file name.

        Returns:
            Absolute path under the data root.

        Raises:
            DataSourceUnavailableError: If the name escapes the data root.
        """
        file_path = (self._data_root / file_name).resolve()
        if not file_path.is_relative_to(self._data_root):
            raise DataSourceUnavailableError(
                f"Data file '{file_name}' resolves outside {self._data_root}. "
                "Use a file name relative to the data root."
            )
        return file_path


class S3JsonFileProvider:
    """Provider downloading data files from an S3 prefix into a local cache.

    Each file is downloaded at most once per provider instance.
    """

    def __init__(self, location: S3Location, config: LookupConfig) -> None:
        """Create a provider for an S3 prefix.

        Args:
            location: Bucket and prefix holding the data files.
            config: Runtime config with cache dir and session settings.
        """
        self._location = location
        self._config = config
        self._client: Any = None
        self._downloaded: dict[str, Path] = {}
        self._lock = threading.Lock()

    def get_data_file_path(self, file_name: str) -> Path:
        """Download a data file if needed and return its cached path.

        Args:
            file_name: Logical data file name.

        Returns:
            Local path of the downloaded object.

        Raises:
            DataSourceUnavailableError: If the download fails.
            PersonLookupDependencyError: If boto3 is missing.
        """
        with self._lock:
            cached_path = self._downloaded.get(file_name)
            if cached_path is not None:
                return cached_path
            cached_path = self._download(file_name)
            self._downloaded[file_name] = cached_path
            return cached_path

    def _download(self, file_name: str) -> Path:
        """Download one object into the cache directory.

        Args:
            file_name: Logical data file name.

        Returns:
            Local path of the downloaded object.

        Raises:
            DataSourceUnavailableError: If the object cannot be fetched.
        """
        if self._client is None:
            self._client = _create_s3_client(self._config)
        object_key = self._location.object_key(file_name)
        target_path = self._config.cache_dir / self._location.bucket / object_key
        target_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._client.download_file(self._location.bucket, object_key, str(target_path))
        except Exception as error:
            raise DataSourceUnavailableError(
                f"Failed to download s3://{self._location.bucket}/{object_key}: {error}. "
                "Check the object exists and AWS credentials allow reading it."
            ) from error
        _LOGGER.info(
            "s3_data_file_downloaded",
            bucket=self._location.bucket,
            key=object_key,
            path=str(target_path),
        )
        return target_path


def create_file_provider(config: LookupConfig) -> JsonFileProvider:
    """Build the file provider matching the configured data root.

    Args:
        config: Runtime configuration.

    Returns:
        S3 provider for ``s3://`` roots, local directory provider otherwise.
    """
    if config.is_s3:
        return S3JsonFileProvider(parse_s3_uri(config.data_root), config)
    return DataDirectoryFileProvider(config.data_root)


def _create_s3_client(config: LookupConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        PersonLookupDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise PersonLookupDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install person-lookup[s3] to read data files from s3:// roots."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: LookupConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config.

    Args:
        config: Runtime config.

    Returns:
        Session keyword arguments.
    """
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
