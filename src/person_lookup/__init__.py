"""Public SDK surface for person lookup.

This module provides a stable import path for lookup users.
It re-exports the lookup facade, typed models, and error types.
"""

from __future__ import annotations

from person_lookup.core.config import LookupConfig
from person_lookup.core.errors import (
    DataSourceUnavailableError,
    InvalidArgumentError,
    InvalidIdentityFormatError,
    MalformedDataError,
    PersonLookupConfigError,
    PersonLookupDependencyError,
    PersonLookupError,
)
from person_lookup.core.types import (
    IndexState,
    Person,
    PersonDraft,
    PersonIndexStats,
    PersonLookupKey,
    PersonMapper,
    ScrawlResultRecord,
)
from person_lookup.ingest.file_provider import (
    DataDirectoryFileProvider,
    JsonFileProvider,
    S3JsonFileProvider,
    create_file_provider,
)
from person_lookup.serve.json_person_lookup import JsonPersonLookup, PersonLookup
from person_lookup.serve.person_mapper import ScrawlResultPersonMapper
from person_lookup.store.person_index import PersonIndex

__all__ = [
    "DataDirectoryFileProvider",
    "DataSourceUnavailableError",
    "IndexState",
    "InvalidArgumentError",
    "InvalidIdentityFormatError",
    "JsonFileProvider",
    "JsonPersonLookup",
    "LookupConfig",
    "MalformedDataError",
    "Person",
    "PersonDraft",
    "PersonIndex",
    "PersonIndexStats",
    "PersonLookup",
    "PersonLookupConfigError",
    "PersonLookupDependencyError",
    "PersonLookupError",
    "PersonLookupKey",
    "PersonMapper",
    "S3JsonFileProvider",
    "ScrawlResultPersonMapper",
    "ScrawlResultRecord",
    "create_file_provider",
]
