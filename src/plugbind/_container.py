from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ._errors import CyclicDependencyError, NotFoundError
from ._factories import build_factories


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._providers import Factory, Resolver, ServiceProvider


class SlotState(Enum):
    UNRESOLVED = "unresolved"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


@dataclass
class Slot:
    state: SlotState
    factory: Factory | None = None
    value: object | None = None  # only meaningful once RESOLVED


class Container:
    """Minimal DI container.

    - entries: pre-built values, always preferred over factories
    - factories and extensions declared by service providers
    - every entry is built at most once and cached
    - cyclic dependency detection
    - optional delegate passed to factories instead of the container.
    """

    def __init__(
        self,
        providers: Iterable[ServiceProvider] = (),
        entries: Mapping[Any, object] | None = None,
        *,
        delegate: Resolver | None = None,
    ) -> None:
        self._slots: dict[Any, Slot] = {
            id_: Slot(state=SlotState.UNRESOLVED, factory=factory)
            for id_, factory in build_factories(providers).items()
        }
        # Entries win over factories with the same id
        for id_, value in (entries or {}).items():
            self._slots[id_] = Slot(state=SlotState.RESOLVED, value=value)

        self._context: Resolver = delegate if delegate is not None else self
        self._lock = threading.RLock()

    def has(self, id: Any) -> bool:  # noqa: A002
        """Tell whether `id` has an entry or a factory. Never builds anything."""
        return id in self._slots

    def get(self, id: Any) -> Any:  # noqa: A002
        """Return the entry for `id`, building it on first access.

        Raises NotFoundError for unknown ids and CyclicDependencyError when `id`
        is requested again while its factory is still running.
        """
        with self._lock:
            return self._resolve(id)

    def create_child(
        self,
        providers: Iterable[ServiceProvider] = (),
        entries: Mapping[Any, object] | None = None,
    ) -> Container:
        """Create a container whose factories receive this container as context.

        The child's own `has`/`get` never fall back to this container.
        """
        return Container(providers, entries, delegate=self)

    def _resolve(self, id: Any) -> Any:  # noqa: A002
        slot = self._slots.get(id)
        if slot is None:
            raise NotFoundError(id)

        if slot.state is SlotState.RESOLVED:
            return slot.value

        if slot.state is SlotState.IN_PROGRESS:
            raise CyclicDependencyError(id)

        factory = slot.factory
        # Marked before the call so re-entrant requests for `id` see it.
        # Left in place when the factory raises: no retry.
        slot.state = SlotState.IN_PROGRESS
        slot.factory = None

        logger.debug("Building container entry %r", id)
        value = factory(self._context)  # type: ignore[misc]

        slot.value = value
        slot.state = SlotState.RESOLVED
        return value
