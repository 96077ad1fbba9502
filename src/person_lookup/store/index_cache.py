"""Build-once memoization for the person index.

This module provides a thread-safe lazy value with an explicit state.
A failed build publishes nothing, so the next caller builds again.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

from person_lookup.core.logging_config import get_logger
from person_lookup.core.types import IndexState

_LOGGER = get_logger(__name__)

ValueT = TypeVar("ValueT")


class LazyValue(Generic[ValueT]):
    """Value computed by a factory at most once per successful build.

    Reads after publication take no lock. Concurrent first callers
    serialize on a lock and all but the first reuse the published value.
    """

    def __init__(self, factory: Callable[[], ValueT], name: str = "value") -> None:
        """Create a lazy value.

        Args:
            factory: Zero-argument callable producing the value.
            name: Label used in log events.
        """
        self._factory = factory
        self._name = name
        self._lock = threading.Lock()
        self._value: ValueT | None = None
        self._state = IndexState.PENDING
        self._build_count = 0

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def build_count(self) -> int:
        """Number of factory invocations, successful or not."""
        return self._build_count

    def get(self) -> ValueT:
        """Return the value, building it first if needed.

        Returns:
            The published value.

        Raises:
            Exception: Whatever the factory raises; nothing is published.
        """
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._build()
            return self._value

    def _build(self) -> ValueT:
        """Invoke the factory while holding the lock."""
        self._build_count += 1
        try:
            value = self._factory()
        except Exception as error:
            self._state = IndexState.FAILED
            _LOGGER.error(
                f"{self._name}_build_failed",
                attempt=self._build_count,
                error_type=type(error).__name__,
                error=str(error),
            )
            raise
        self._state = IndexState.BUILT
        return value
