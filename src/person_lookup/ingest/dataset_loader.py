"""Keyed dataset loading.

This module reads a data file and keys its typed records by natural key.
Duplicate keys resolve deterministically: the later record in file order
replaces the earlier one, while the key keeps its first position.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from person_lookup.core.errors import MalformedDataError
from person_lookup.core.logging_config import get_logger
from person_lookup.core.types import ExistingPersonRecord, ScrawlResultRecord
from person_lookup.ingest.file_provider import JsonFileProvider
from person_lookup.ingest.record_reader import RawRecord, read_json_data_file
from person_lookup.ingest.record_schema import decode_existing_person, decode_scrawl_result

_LOGGER = get_logger(__name__)

RecordT = TypeVar("RecordT")


def load_keyed_dataset(
    file_name: str,
    file_provider: JsonFileProvider,
    decode: Callable[[RawRecord, int], RecordT],
    key_of: Callable[[RecordT], str],
) -> dict[str, RecordT]:
    """Load a data file into a dictionary keyed by natural key.

    Args:
        file_name: Logical data file name.
        file_provider: Provider resolving the file name.
        decode: Converts a raw record and its position into a typed record.
        key_of: Extracts the natural key from a typed record.

    Returns:
        Records by key, last writer wins for duplicate keys.

    Raises:
        DataSourceUnavailableError: If the file cannot be read.
        MalformedDataError: If the file or one of its records is malformed.
    """
    dataset: dict[str, RecordT] = {}
    overwritten = 0
    for source_index, raw_record in enumerate(read_json_data_file(file_name, file_provider)):
        try:
            record = decode(raw_record, source_index)
        except MalformedDataError as error:
            raise MalformedDataError(f"Malformed data in {file_name}: {error}") from error
        key = key_of(record)
        if key in dataset:
            overwritten += 1
        dataset[key] = record
    if overwritten:
        _LOGGER.warning("dataset_duplicate_keys", file_name=file_name, overwritten=overwritten)
    _LOGGER.info("dataset_loaded", file_name=file_name, records=len(dataset))
    return dataset


def load_existing_persons(
    file_name: str,
    file_provider: JsonFileProvider,
) -> dict[str, ExistingPersonRecord]:
    """Load existing persons keyed by their ``userData`` join key."""
    return load_keyed_dataset(
        file_name,
        file_provider,
        decode_existing_person,
        lambda record: record.user_data,
    )


def load_scrawl_results(
    file_name: str,
    file_provider: JsonFileProvider,
) -> dict[str, ScrawlResultRecord]:
    """Load scrawl results keyed by their ``name|email`` join key."""
    return load_keyed_dataset(
        file_name,
        file_provider,
        decode_scrawl_result,
        lambda record: record.join_key,
    )
