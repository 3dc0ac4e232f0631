"""Minimal dependency injection container driven by service providers.

Service providers declare factories and extensions keyed by identifier. The
container merges them once at construction and builds each entry lazily, at
most once, detecting cyclic dependency chains along the way.

Exports:
- `Container`: registry with `has`/`get`, pre-built entries and an optional
  delegate passed to factories in place of the container.
- `Provider`: plain provider built from factory and extension mappings.
- `ServiceProvider`, `Resolver`: protocols for providers and for the context
  factories receive.
- `ContainerError`, `NotFoundError`, `CyclicDependencyError`: failures raised
  by `get`.
"""

from ._container import Container
from ._errors import ContainerError, CyclicDependencyError, NotFoundError
from ._providers import Provider, Resolver, ServiceProvider


__all__ = [
    "Container",
    "ContainerError",
    "CyclicDependencyError",
    "NotFoundError",
    "Provider",
    "Resolver",
    "ServiceProvider",
]
