"""Typed record decoding for both data files.

This module converts raw JSON objects into frozen per-source records.
Missing or mistyped required fields are reported as malformed data.
"""

from __future__ import annotations

from types import MappingProxyType

from person_lookup.core.constants import (
    EMAIL_ADDRESS_FIELD,
    PERSON_ID_FIELD,
    PERSON_NAME_FIELD,
    USER_DATA_FIELD,
)
from person_lookup.core.errors import MalformedDataError
from person_lookup.core.types import ExistingPersonRecord, ScrawlResultRecord
from person_lookup.ingest.record_reader import RawRecord


def decode_existing_person(raw_record: RawRecord, source_index: int) -> ExistingPersonRecord:
    """Decode one existing persons entry.

    The person id is kept raw; it is validated only for joined records.

    Args:
        raw_record: Raw JSON object.
        source_index: Position of the record in its file.

    Returns:
        Typed existing person record.

    Raises:
        MalformedDataError: If ``userData`` is missing or not a string.
    """
    return ExistingPersonRecord(
        user_data=_require_string(raw_record, USER_DATA_FIELD, source_index),
        person_id=raw_record.get(PERSON_ID_FIELD),
        source_index=source_index,
    )


def decode_scrawl_result(raw_record: RawRecord, source_index: int) -> ScrawlResultRecord:
    """Decode one scrawl results entry.

    Args:
        raw_record: Raw JSON object.
        source_index: Position of the record in its file.

    Returns:
        Typed scrawl result record with the remaining fields attached.

    Raises:
        MalformedDataError: If name or email is missing or not a string.
    """
    person_name = _require_string(raw_record, PERSON_NAME_FIELD, source_index)
    email_address = _require_string(raw_record, EMAIL_ADDRESS_FIELD, source_index)
    extra_fields = {
        key: value
        for key, value in raw_record.items()
        if key not in (PERSON_NAME_FIELD, EMAIL_ADDRESS_FIELD)
    }
    return ScrawlResultRecord(
        person_name=person_name,
        email_address=email_address,
        fields=MappingProxyType(extra_fields),
        source_index=source_index,
    )


def _require_string(raw_record: RawRecord, field_name: str, source_index: int) -> str:
    """Return a required string field.

    Args:
        raw_record: Raw JSON object.
        field_name: JSON field name.
        source_index: Record position for error context.

    Returns:
        Field value.

    Raises:
        MalformedDataError: If the field is missing or not a string.
    """
    value = raw_record.get(field_name)
    if not isinstance(value, str):
        raise MalformedDataError(
            f"Invalid record at position {source_index}: expected string field "
            f"'{field_name}', got {type(value).__name__}."
        )
    return value
