"""Storage back ends for :class:`pimplstack.stack.Stack`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pimplstack.forward_list import ForwardList


class StackImplementation(ABC):
    """The operations a stack storage back end provides."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Add a value on top."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove the top value and return it."""

    @abstractmethod
    def top(self) -> Any:
        """Return the top value without removing it."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Tell whether no values are stored."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored values."""

    @abstractmethod
    def copy(self) -> StackImplementation:
        """Return an independent copy."""


class StackList(StackImplementation):
    """Stack storage kept in a :class:`ForwardList`."""

    def __init__(self) -> None:
        self._data = ForwardList()

    def push(self, value: Any) -> None:
        self._data.push_back(value)

    def pop(self) -> Any:
        return self._data.pop_back()

    def top(self) -> Any:
        return self._data.back()

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> StackList:
        duplicate = StackList()
        duplicate._data = self._data.copy()
        return duplicate


class StackVector(StackImplementation):
    """Stack storage kept in a dynamic array."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    def push(self, value: Any) -> None:
        self._data.append(value)

    def pop(self) -> Any:
        if not self._data:
            raise IndexError("Vector is empty")
        return self._data.pop()

    def top(self) -> Any:
        if not self._data:
            raise IndexError("Vector is empty")
        return self._data[-1]

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> StackVector:
        duplicate = StackVector()
        duplicate._data = list(self._data)
        return duplicate