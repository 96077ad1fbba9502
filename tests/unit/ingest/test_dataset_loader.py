"""Unit tests for keyed dataset loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from person_lookup.core.errors import MalformedDataError
from person_lookup.ingest.dataset_loader import load_existing_persons, load_scrawl_results
from person_lookup.ingest.file_provider import DataDirectoryFileProvider
from tests.fixture_paths import fixture_path, write_data_file


def test_load_scrawl_results_keys_by_name_and_email() -> None:
    """Scrawl results should be keyed by name|email."""
    dataset = load_scrawl_results("scrawlResult.json", DataDirectoryFileProvider(fixture_path("data")))

    assert list(dataset) == [
        "Bob Stone|bob@example.com",
        "Alice Walker|alice@example.com",
        "Dave Ng|dave@example.com",
        "Bob Stone|bob.stone@work.example.com",
    ]


def test_load_existing_persons_keys_by_user_data() -> None:
    """Existing persons should be keyed by their userData value."""
    provider = DataDirectoryFileProvider(fixture_path("data"))

    dataset = load_existing_persons("existingPersons.json", provider)

    assert dataset["Carol Reyes|carol@example.com"].person_id == (
        "33333333-3333-3333-3333-333333333333"
    )


def test_duplicate_keys_keep_last_record_at_first_position(tmp_path: Path) -> None:
    """Later duplicates should replace earlier ones without moving the key."""
    write_data_file(
        tmp_path,
        "existingPersons.json",
        [
            {"userData": "alice|a@x.com", "personId": "first"},
            {"userData": "bob|b@x.com", "personId": "bob"},
            {"userData": "alice|a@x.com", "personId": "last"},
        ],
    )

    dataset = load_existing_persons("existingPersons.json", DataDirectoryFileProvider(tmp_path))

    assert [(key, record.person_id) for key, record in dataset.items()] == [
        ("alice|a@x.com", "last"),
        ("bob|b@x.com", "bob"),
    ]


def test_load_scrawl_results_names_file_for_bad_record(tmp_path: Path) -> None:
    """Decode failures should report the data file name."""
    write_data_file(tmp_path, "scrawlResult.json", [{"personName": "alice"}])

    with pytest.raises(MalformedDataError, match="scrawlResult.json"):
        load_scrawl_results("scrawlResult.json", DataDirectoryFileProvider(tmp_path))
