"""Person index construction.

This module inner-joins scrawl results with existing persons on the
``name|email`` natural key and groups mapped persons by identity.

Records without a counterpart on the other side are dropped. Only the
drop counts are reported, through the build log event and index stats.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping
from uuid import UUID

from person_lookup.core.config import LookupConfig
from person_lookup.core.errors import InvalidIdentityFormatError
from person_lookup.core.logging_config import get_logger
from person_lookup.core.types import (
    ExistingPersonRecord,
    Person,
    PersonDraft,
    PersonIndexStats,
    PersonMapper,
    ScrawlResultRecord,
)
from person_lookup.ingest.dataset_loader import load_existing_persons, load_scrawl_results
from person_lookup.ingest.file_provider import JsonFileProvider

_LOGGER = get_logger(__name__)


class PersonIndex:
    """Immutable multi-valued mapping from person identity to persons.

    Groups keep the order in which identities first appeared and each
    group keeps the insertion order of its persons.
    """

    def __init__(
        self,
        groups: Mapping[UUID, tuple[Person, ...]],
        stats: PersonIndexStats | None = None,
    ) -> None:
        """Create an index from prebuilt groups.

        Args:
            groups: Persons by identity.
            stats: Join statistics from the build.
        """
        self._groups = MappingProxyType(dict(groups))
        self._stats = stats or PersonIndexStats(matched_count=self.person_count)

    def __contains__(self, identity: object) -> bool:
        return identity in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def stats(self) -> PersonIndexStats:
        return self._stats

    @property
    def person_count(self) -> int:
        """Total number of persons across all identities."""
        return sum(len(group) for group in self._groups.values())

    def get(self, identity: UUID) -> tuple[Person, ...]:
        """Return persons grouped under an identity, empty when absent."""
        return self._groups.get(identity, ())

    def identities(self) -> tuple[UUID, ...]:
        return tuple(self._groups)

    def groups(self) -> Mapping[UUID, tuple[Person, ...]]:
        """Return a read-only view of all groups."""
        return self._groups

    def iter_persons(self) -> Iterator[Person]:
        """Yield every person, group by group."""
        for group in self._groups.values():
            yield from group


def parse_person_identity(raw_value: Any, join_key: str) -> UUID:
    """Parse a person identity from an existing person record.

    Args:
        raw_value: Raw ``personId`` value.
        join_key: Join key of the record, for error context.

    Returns:
        Parsed identity.

    Raises:
        InvalidIdentityFormatError: If the value is not a UUID string.
    """
    if not isinstance(raw_value, str):
        raise InvalidIdentityFormatError(
            f"Invalid personId for existing person '{join_key}': expected a UUID "
            f"string, got {type(raw_value).__name__}. Fix the existing persons file."
        )
    try:
        return UUID(raw_value.strip())
    except ValueError as error:
        raise InvalidIdentityFormatError(
            f"Invalid personId '{raw_value}' for existing person '{join_key}': "
            "expected a UUID. Fix the existing persons file."
        ) from error


def build_person_index(
    scrawl_results: Mapping[str, ScrawlResultRecord],
    existing_persons: Mapping[str, ExistingPersonRecord],
    mapper: PersonMapper,
) -> PersonIndex:
    """Join both datasets and group mapped persons by identity.

    Args:
        scrawl_results: Scrawl results by ``name|email`` key.
        existing_persons: Existing persons by ``userData`` key.
        mapper: Builds a person from a joined pair.

    Returns:
        Immutable person index.

    Raises:
        InvalidIdentityFormatError: If a joined record has an invalid identity.
    """
    groups: dict[UUID, list[Person]] = {}
    matched = 0
    for scrawl_result in scrawl_results.values():
        join_key = scrawl_result.join_key
        existing_person = existing_persons.get(join_key)
        if existing_person is None:
            continue
        identity = parse_person_identity(existing_person.person_id, join_key)
        person = mapper.map(scrawl_result, PersonDraft(person_identity=identity))
        groups.setdefault(identity, []).append(person)
        matched += 1
    stats = PersonIndexStats(
        scrawl_result_count=len(scrawl_results),
        existing_person_count=len(existing_persons),
        matched_count=matched,
        unmatched_scrawl_result_count=len(scrawl_results) - matched,
        unmatched_existing_person_count=len(existing_persons) - matched,
    )
    return PersonIndex({identity: tuple(group) for identity, group in groups.items()}, stats)


def load_person_index(
    config: LookupConfig,
    file_provider: JsonFileProvider,
    mapper: PersonMapper,
) -> PersonIndex:
    """Read both data files and build the person index.

    Args:
        config: Runtime config naming the data files.
        file_provider: Provider resolving data file names.
        mapper: Builds a person from a joined pair.

    Returns:
        Immutable person index.

    Raises:
        DataSourceUnavailableError: If a data file cannot be read.
        MalformedDataError: If a data file is malformed.
        InvalidIdentityFormatError: If a joined record has an invalid identity.
    """
    _LOGGER.info(
        "person_index_build_started",
        scrawl_results_file=config.scrawl_results_file,
        existing_persons_file=config.existing_persons_file,
    )
    scrawl_results = load_scrawl_results(config.scrawl_results_file, file_provider)
    existing_persons = load_existing_persons(config.existing_persons_file, file_provider)
    index = build_person_index(scrawl_results, existing_persons, mapper)
    stats = index.stats
    _LOGGER.info(
        "person_index_built",
        identities=len(index),
        persons=index.person_count,
        unmatched_scrawl_results=stats.unmatched_scrawl_result_count,
        unmatched_existing_persons=stats.unmatched_existing_person_count,
    )
    return index
