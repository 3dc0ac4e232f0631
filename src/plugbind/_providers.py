from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    Factory = Callable[["Resolver"], Any]
    Extension = Callable[["Resolver", Any], Any]


@runtime_checkable
class Resolver(Protocol):
    """What factories and extensions receive as their first argument."""

    def has(self, id: Any) -> bool: ...  # noqa: A002

    def get(self, id: Any) -> Any: ...  # noqa: A002


@runtime_checkable
class ServiceProvider(Protocol):
    """Source of factory and extension declarations for a container.

    - `get_factories()` maps identifiers to one-argument factories.
    - `get_extensions()` maps identifiers to two-argument extensions that receive
      the previously built value (or None when there is no prior factory).
    """

    def get_factories(self) -> Mapping[Any, Factory]: ...

    def get_extensions(self) -> Mapping[Any, Extension]: ...


@dataclass
class Provider:
    """Plain provider built from two mappings.

    Example:
      Provider(factories={"db": lambda c: connect(c.get("dsn"))})
    """

    factories: dict[Any, Factory] = field(default_factory=dict)
    extensions: dict[Any, Extension] = field(default_factory=dict)

    def get_factories(self) -> Mapping[Any, Factory]:
        return self.factories

    def get_extensions(self) -> Mapping[Any, Extension]:
        return self.extensions
