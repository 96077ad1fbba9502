"""Integration tests for the JSON person lookup workflow."""

from __future__ import annotations

import asyncio
from uuid import UUID

import pytest

from person_lookup import (
    IndexState,
    InvalidIdentityFormatError,
    JsonPersonLookup,
    LookupConfig,
    MalformedDataError,
    PersonLookupKey,
)
from tests.fixture_paths import fixture_path

ALICE_ID = UUID("11111111-1111-1111-1111-111111111111")
BOB_ID = UUID("22222222-2222-2222-2222-222222222222")
CAROL_ID = UUID("33333333-3333-3333-3333-333333333333")


def test_lookup_from_env_serves_fixture_data(monkeypatch: pytest.MonkeyPatch) -> None:
    """End-to-end flow should join fixture files and serve grouped persons."""
    monkeypatch.setenv("PERSON_LOOKUP_DATA_ROOT", str(fixture_path("data")))
    lookup = JsonPersonLookup()

    persons = lookup.find([PersonLookupKey(BOB_ID), PersonLookupKey(CAROL_ID)])

    assert [(person.name, person.office_name) for person in persons] == [
        ("Bob Stone", "Harbour City"),
        ("Bob Stone", "Riverside"),
    ]


def test_as_enumerable_excludes_join_misses() -> None:
    """Unmatched scrawl results and existing persons should not be served."""
    lookup = JsonPersonLookup(LookupConfig(data_root=str(fixture_path("data"))))

    names = [person.name for person in lookup.as_enumerable()]

    assert names == ["Bob Stone", "Bob Stone", "Alice Walker"]


def test_find_async_returns_same_results_as_find() -> None:
    """Async lookups should match synchronous lookups."""
    lookup = JsonPersonLookup(LookupConfig(data_root=str(fixture_path("data"))))
    keys = [PersonLookupKey(ALICE_ID)]

    async_persons = asyncio.run(lookup.find_async(keys))

    assert (async_persons, lookup.index_state) == (lookup.find(keys), IndexState.BUILT)


def test_non_array_source_fails_lookup() -> None:
    """A scrawl results file that is not an array should fail the lookup."""
    lookup = JsonPersonLookup(LookupConfig(data_root=str(fixture_path("not_array"))))

    with pytest.raises(MalformedDataError):
        lookup.find([PersonLookupKey(ALICE_ID)])


def test_invalid_identity_fixture_fails_lookup() -> None:
    """A matched existing person with a malformed id should fail the lookup."""
    lookup = JsonPersonLookup(LookupConfig(data_root=str(fixture_path("bad_identity"))))

    with pytest.raises(InvalidIdentityFormatError):
        lookup.as_enumerable()

    assert lookup.index_state == IndexState.FAILED
