"""Unit tests for the default person mapper."""

from __future__ import annotations

from uuid import UUID

from person_lookup.core.types import PersonDraft, ScrawlResultRecord
from person_lookup.serve.person_mapper import ScrawlResultPersonMapper

ALICE_ID = UUID("11111111-1111-1111-1111-111111111111")


def test_map_copies_identity_and_contact_fields() -> None:
    """Mapper should carry the draft identity and contact details."""
    record = ScrawlResultRecord(
        person_name=" Alice Walker ",
        email_address="alice@example.com",
        fields={"position": "Branch Manager", "mobileNumber": "021 555 0101"},
    )

    person = ScrawlResultPersonMapper().map(record, PersonDraft(person_identity=ALICE_ID))

    assert (person.person_identity, person.name, person.position, person.mobile_number) == (
        ALICE_ID,
        "Alice Walker",
        "Branch Manager",
        "021 555 0101",
    )


def test_map_leaves_missing_profile_fields_empty() -> None:
    """Mapper should leave absent optional fields as None."""
    record = ScrawlResultRecord(person_name="Alice", email_address="alice@example.com")

    person = ScrawlResultPersonMapper().map(record, PersonDraft(person_identity=ALICE_ID))

    assert (person.phone_number, person.office_name, person.photo_url) == (None, None, None)
