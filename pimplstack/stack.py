"""A stack whose storage is chosen at construction."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pimplstack.implementations import StackImplementation, StackList, StackVector


class StackContainer(Enum):
    """The storage a :class:`Stack` is built on."""

    VECTOR = 0
    LIST = 1


_IMPLEMENTATIONS: dict[StackContainer, type[StackImplementation]] = {
    StackContainer.VECTOR: StackVector,
    StackContainer.LIST: StackList,
}


def _make_implementation(container: StackContainer) -> StackImplementation:
    try:
        return _IMPLEMENTATIONS[container]()
    except KeyError:
        raise ValueError("dont have a container this type") from None


class Stack:
    """A last-in, first-out stack delegating to a storage back end."""

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        container: StackContainer = StackContainer.VECTOR,
    ) -> None:
        try:
            self._container = StackContainer(container)
        except ValueError:
            raise ValueError("dont have a container this type") from None
        self._impl = _make_implementation(self._container)
        for value in values or ():
            self._impl.push(value)

    @property
    def container(self) -> StackContainer:
        return self._container

    def copy(self) -> Stack:
        """Return an independent stack on the same kind of storage."""
        duplicate = Stack(container=self._container)
        duplicate._impl = self._impl.copy()
        return duplicate

    def __copy__(self) -> Stack:
        return self.copy()

    def push(self, value: Any) -> None:
        self._impl.push(value)

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if self.is_empty():
            raise IndexError("empty container")
        return self._impl.pop()

    def top(self) -> Any:
        if self.is_empty():
            raise IndexError("empty container")
        return self._impl.top()

    def is_empty(self) -> bool:
        return self._impl.is_empty()

    def __len__(self) -> int:
        return len(self._impl)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"Stack(size={len(self)}, container={self._container.name})"