from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._providers import Extension, Factory, Resolver, ServiceProvider


class ExtendedFactory:
    """Factory that feeds the result of `inner` into `extension`."""

    __slots__ = ("extension", "inner")

    def __init__(self, extension: Extension, inner: Factory) -> None:
        self.extension = extension
        self.inner = inner

    def __call__(self, context: Resolver) -> Any:
        previous = self.inner(context)
        return self.extension(context, previous)

    def __repr__(self) -> str:
        return f"ExtendedFactory({self.extension!r}, inner={self.inner!r})"


class BareExtension:
    """Extension registered without a prior factory; previous value is None."""

    __slots__ = ("extension",)

    def __init__(self, extension: Extension) -> None:
        self.extension = extension

    def __call__(self, context: Resolver) -> Any:
        return self.extension(context, None)

    def __repr__(self) -> str:
        return f"BareExtension({self.extension!r})"


def build_factories(providers: Iterable[ServiceProvider]) -> dict[Any, Factory]:
    """Merge provider declarations into a single identifier -> factory table.

    All factories are merged first (later provider wins), then extensions are
    applied in provider order, each one wrapping whatever is registered at that
    point. Nothing declared here is called.
    """
    providers = list(providers)
    for provider in providers:
        _validate_provider(provider)

    factories: dict[Any, Factory] = {}

    for provider in providers:
        for id_, factory in _declarations(provider, provider.get_factories(), "factory"):
            if id_ in factories:
                logger.debug("Factory for %r overridden by %s", id_, type(provider).__name__)
            factories[id_] = factory

    for provider in providers:
        for id_, extension in _declarations(provider, provider.get_extensions(), "extension"):
            previous = factories.get(id_)
            if previous is None:
                logger.debug("Extension for %r registered without a prior factory", id_)
                factories[id_] = BareExtension(extension)
            else:
                factories[id_] = ExtendedFactory(extension, previous)

    logger.debug("Built factory table with %d entries from %d providers", len(factories), len(providers))
    return factories


def _validate_provider(provider: object) -> None:
    for name in ("get_factories", "get_extensions"):
        if not callable(getattr(provider, name, None)):
            msg = f"Provider {type(provider).__name__} does not implement {name}()"
            raise TypeError(msg)


def _declarations(provider: object, declared: Mapping[Any, Any], kind: str) -> list[tuple[Any, Any]]:
    items = list(declared.items())
    for id_, func in items:
        if not callable(func):
            msg = f"{kind.capitalize()} for {id_!r} from {type(provider).__name__} is not callable: {func!r}"
            raise TypeError(msg)
    return items
