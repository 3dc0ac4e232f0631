from __future__ import annotations

from typing import Any


class ContainerError(RuntimeError):
    """Base class for every failure raised by the container."""

    def __init__(self, msg: str, id: Any = None) -> None:  # noqa: A002
        super().__init__(msg)
        self.id = id


class NotFoundError(ContainerError, KeyError):
    """Raised when an identifier has neither an entry nor a factory."""

    def __init__(self, id: Any) -> None:  # noqa: A002
        msg = f'Container entry "{id}" is not available.'
        super().__init__(msg, id)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class CyclicDependencyError(ContainerError):
    """Raised when an identifier is requested again while it is being built."""

    def __init__(self, id: Any) -> None:  # noqa: A002
        msg = f'Container entry "{id}" is part of a cyclic dependency chain.'
        super().__init__(msg, id)
