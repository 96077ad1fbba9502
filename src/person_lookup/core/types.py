"""Shared typed models.

This module defines immutable data models used by the ingest, store,
and serve layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Protocol
from uuid import UUID

from person_lookup.core.constants import JOIN_KEY_SEPARATOR


def build_join_key(name: str, email_address: str) -> str:
    """Build the composite natural key shared by both datasets.

    Args:
        name: Person display name.
        email_address: Person email address.

    Returns:
        Join key in ``name|email`` form.
    """
    return f"{name}{JOIN_KEY_SEPARATOR}{email_address}"


@dataclass(frozen=True)
class ExistingPersonRecord:
    """Typed record from the existing persons file.

    Attributes:
        user_data: Precomputed ``name|email`` join key.
        person_id: Raw person identity text, parsed only when joined.
        source_index: Zero-based position of the record in its file.
    """

    user_data: str
    person_id: Any
    source_index: int


@dataclass(frozen=True)
class ScrawlResultRecord:
    """Typed record from the scrawl results file.

    Attributes:
        person_name: Person display name.
        email_address: Person email address.
        fields: Remaining JSON fields, consumed by the record mapper.
        source_index: Zero-based position of the record in its file.
    """

    person_name: str
    email_address: str
    fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    source_index: int = 0

    @property
    def join_key(self) -> str:
        """Return the ``name|email`` key used to join existing persons."""
        return build_join_key(self.person_name, self.email_address)

    def text_field(self, name: str) -> str | None:
        """Return a non-empty string field, or None when absent or not text."""
        value = self.fields.get(name)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None


@dataclass(frozen=True)
class PersonDraft:
    """Partially built person carrying only the parsed identity."""

    person_identity: UUID


@dataclass(frozen=True)
class Person:
    """Person entity served by lookups.

    Attributes:
        person_identity: Globally unique person identity.
        name: Display name.
        email_address: Contact email address.
        phone_number: Optional landline number.
        mobile_number: Optional mobile number.
        position: Optional job title.
        office_name: Optional office the person belongs to.
        profile_url: Optional public profile page.
        photo_url: Optional profile photo.
    """

    person_identity: UUID
    name: str
    email_address: str
    phone_number: str | None = None
    mobile_number: str | None = None
    position: str | None = None
    office_name: str | None = None
    profile_url: str | None = None
    photo_url: str | None = None


class PersonMapper(Protocol):
    """Maps a joined scrawl result into a person."""

    def map(self, record: ScrawlResultRecord, draft: PersonDraft) -> Person:
        """Build a person from a scrawl result and its identity draft."""
        ...


@dataclass(frozen=True)
class PersonLookupKey:
    """Lookup request key wrapping a person identity."""

    key: UUID | None


@dataclass(frozen=True)
class PersonIndexStats:
    """Join statistics captured while building a person index.

    Attributes:
        scrawl_result_count: Keyed scrawl result records considered.
        existing_person_count: Keyed existing person records considered.
        matched_count: Joined record pairs mapped into persons.
        unmatched_scrawl_result_count: Scrawl results with no existing person.
        unmatched_existing_person_count: Existing persons with no scrawl result.
    """

    scrawl_result_count: int = 0
    existing_person_count: int = 0
    matched_count: int = 0
    unmatched_scrawl_result_count: int = 0
    unmatched_existing_person_count: int = 0


class IndexState(Enum):
    """Lifecycle state of a memoized index."""

    PENDING = "pending"
    BUILT = "built"
    FAILED = "failed"
