"""Person lookup backed by the persisted JSON data files.

This module exposes the lookup facade used by request handlers.
The person index is built on first use and reused for the instance lifetime.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, Protocol
from uuid import UUID

from person_lookup.core.config import LookupConfig
from person_lookup.core.errors import InvalidArgumentError
from person_lookup.core.types import IndexState, Person, PersonLookupKey, PersonMapper
from person_lookup.ingest.file_provider import JsonFileProvider, create_file_provider
from person_lookup.serve.person_mapper import ScrawlResultPersonMapper
from person_lookup.store.index_cache import LazyValue
from person_lookup.store.person_index import PersonIndex, load_person_index


class PersonLookup(Protocol):
    """Lookup of persons by identity."""

    def find(self, person_keys: Iterable[PersonLookupKey]) -> list[Person]:
        ...

    def as_enumerable(self) -> list[Person]:
        ...


class JsonPersonLookup:
    """Finds persons by joining scrawl results with existing persons.

    Safe to share between threads: the index is built at most once per
    successful build and is read without locking afterwards.
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        file_provider: JsonFileProvider | None = None,
        mapper: PersonMapper | None = None,
    ) -> None:
        """Create a lookup.

        Args:
            config: Optional runtime configuration.
            file_provider: Optional provider resolving data file names.
            mapper: Optional mapper from joined records to persons.
        """
        self._config = config or LookupConfig.from_env()
        self._file_provider = file_provider or create_file_provider(self._config)
        self._mapper = mapper or ScrawlResultPersonMapper()
        self._index = LazyValue(self._load_index, name="person_index")

    @property
    def index_state(self) -> IndexState:
        return self._index.state

    def find(self, person_keys: Iterable[PersonLookupKey]) -> list[Person]:
        """Find persons for each requested identity.

        Args:
            person_keys: Lookup keys, in the order results are wanted.

        Returns:
            Matching persons concatenated in request order. Keys with no
            match contribute nothing.

        Raises:
            InvalidArgumentError: If keys are missing or not UUIDs.
            DataSourceUnavailableError: If a data file cannot be read.
            MalformedDataError: If a data file is malformed.
            InvalidIdentityFormatError: If a joined record has an invalid identity.
        """
        identities = _validate_person_keys(person_keys)
        index = self._index.get()
        results: list[Person] = []
        for identity in identities:
            results.extend(index.get(identity))
        return results

    async def find_async(self, person_keys: Iterable[PersonLookupKey]) -> list[Person]:
        """Run find in a worker thread so the first build does not block the loop."""
        return await asyncio.to_thread(self.find, person_keys)

    def as_enumerable(self) -> list[Person]:
        """Return every indexed person, group by group.

        Returns:
            Flattened persons in index order.
        """
        return list(self._index.get().iter_persons())

    def _load_index(self) -> PersonIndex:
        return load_person_index(self._config, self._file_provider, self._mapper)


def _validate_person_keys(person_keys: Iterable[PersonLookupKey] | None) -> list[UUID]:
    """Materialize and validate lookup keys.

    Args:
        person_keys: Caller supplied keys.

    Returns:
        Identities in request order.

    Raises:
        InvalidArgumentError: If keys are None, or any entry lacks a UUID key.
    """
    if person_keys is None:
        raise InvalidArgumentError("person_keys must not be None.")
    identities: list[UUID] = []
    for position, person_key in enumerate(person_keys):
        key = getattr(person_key, "key", None)
        if key is None:
            raise InvalidArgumentError(
                f"Lookup key at position {position} has no underlying key."
            )
        if not isinstance(key, UUID):
            raise InvalidArgumentError(
                f"Lookup key at position {position} must wrap a UUID, "
                f"got {type(key).__name__}."
            )
        identities.append(key)
    return identities
