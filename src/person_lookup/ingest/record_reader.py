"""Raw JSON data file reader.

This module reads a persisted JSON array into raw record objects.
It preserves source order and leaves field typing to record_schema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from person_lookup.core.constants import DATA_FILE_ENCODING
from person_lookup.core.errors import DataSourceUnavailableError, MalformedDataError
from person_lookup.core.logging_config import get_logger
from person_lookup.ingest.file_provider import JsonFileProvider

_LOGGER = get_logger(__name__)

RawRecord = dict[str, Any]


def read_json_data_file(file_name: str, file_provider: JsonFileProvider) -> list[RawRecord]:
    """Read a JSON data file into ordered raw records.

    Args:
        file_name: Logical data file name.
        file_provider: Provider resolving the name to a local path.

    Returns:
        Raw records in file order.

    Raises:
        DataSourceUnavailableError: If the file cannot be located, read, or decoded.
        MalformedDataError: If the JSON is not an array of objects.
    """
    file_path = file_provider.get_data_file_path(file_name)
    payload = _decode_json_file(file_path)
    records = _validate_record_array(file_path, payload)
    _LOGGER.debug("data_file_read", file_name=file_name, path=str(file_path), records=len(records))
    return records


def _decode_json_file(file_path: Path) -> Any:
    """Read and decode a JSON file.

    Args:
        file_path: Local data file path.

    Returns:
        Decoded JSON value.

    Raises:
        DataSourceUnavailableError: If the file is missing, unreadable, or invalid JSON.
    """
    if not file_path.is_file():
        raise DataSourceUnavailableError(
            f"Failed to read data file at {file_path}: file does not exist. "
            "Check the data root setting and the file name."
        )
    try:
        text = file_path.read_text(encoding=DATA_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise DataSourceUnavailableError(
            f"Failed to read data file at {file_path}: {error}. "
            "Check file permissions and that the file is UTF-8 encoded."
        ) from error
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise DataSourceUnavailableError(
            f"Failed to decode JSON in {file_path} at line {error.lineno} "
            f"column {error.colno}: {error.msg}. Fix the JSON syntax and retry."
        ) from error


def _validate_record_array(file_path: Path, payload: Any) -> list[RawRecord]:
    """Check that decoded JSON is an array of objects.

    Args:
        file_path: Source path for error context.
        payload: Decoded JSON value.

    Returns:
        The array elements as raw records.

    Raises:
        MalformedDataError: If the payload shape is wrong.
    """
    if not isinstance(payload, list):
        raise MalformedDataError(
            f"Invalid data file {file_path}: expected a JSON array of objects, "
            f"got {type(payload).__name__}."
        )
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedDataError(
                f"Invalid record at {file_path}[{position}]: expected a JSON object, "
                f"got {type(item).__name__}."
            )
    return payload
