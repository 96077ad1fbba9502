"""Default scrawl result to person mapping."""

from __future__ import annotations

from person_lookup.core.constants import (
    MOBILE_NUMBER_FIELD,
    OFFICE_NAME_FIELD,
    PHONE_NUMBER_FIELD,
    PHOTO_URL_FIELD,
    POSITION_FIELD,
    PROFILE_URL_FIELD,
)
from person_lookup.core.types import Person, PersonDraft, ScrawlResultRecord


class ScrawlResultPersonMapper:
    """Maps scrawl result fields onto the person entity.

    Optional profile fields are copied when present as non-empty strings
    and left as None otherwise.
    """

    def map(self, record: ScrawlResultRecord, draft: PersonDraft) -> Person:
        """Build a person from a scrawl result and its identity draft.

        Args:
            record: Joined scrawl result.
            draft: Draft carrying the parsed person identity.

        Returns:
            Mapped person.
        """
        return Person(
            person_identity=draft.person_identity,
            name=record.person_name.strip(),
            email_address=record.email_address.strip(),
            phone_number=record.text_field(PHONE_NUMBER_FIELD),
            mobile_number=record.text_field(MOBILE_NUMBER_FIELD),
            position=record.text_field(POSITION_FIELD),
            office_name=record.text_field(OFFICE_NAME_FIELD),
            profile_url=record.text_field(PROFILE_URL_FIELD),
            photo_url=record.text_field(PHOTO_URL_FIELD),
        )
