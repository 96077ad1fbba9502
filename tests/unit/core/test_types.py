"""Unit tests for shared typed models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from uuid import UUID

import pytest

from person_lookup.core.types import Person, ScrawlResultRecord, build_join_key


def test_build_join_key_joins_name_and_email() -> None:
    """Join key should concatenate name and email with a pipe."""
    assert build_join_key("alice", "a@x.com") == "alice|a@x.com"


def test_scrawl_result_join_key_matches_shared_builder() -> None:
    """Scrawl result join key should use the shared builder."""
    record = ScrawlResultRecord(person_name="alice", email_address="a@x.com")

    assert record.join_key == build_join_key("alice", "a@x.com")


def test_text_field_ignores_blank_and_non_text_values() -> None:
    """Optional text fields should skip blanks and non-strings."""
    record = ScrawlResultRecord(
        person_name="alice",
        email_address="a@x.com",
        fields={"position": "  ", "phoneNumber": 5550101, "officeName": " Riverside "},
    )

    values = [record.text_field(name) for name in ("position", "phoneNumber", "officeName")]

    assert values == [None, None, "Riverside"]


def test_person_is_immutable() -> None:
    """Person should reject attribute assignment."""
    person = Person(
        person_identity=UUID("11111111-1111-1111-1111-111111111111"),
        name="alice",
        email_address="a@x.com",
    )

    with pytest.raises(FrozenInstanceError):
        person.name = "bob"  # type: ignore[misc]
