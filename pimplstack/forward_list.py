"""A singly linked list with cycle detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, TextIO


class CycleError(RuntimeError):
    """Raised when an operation cannot be done on a list that contains a cycle."""


@dataclass(eq=False)
class Node:
    """One link of a :class:`ForwardList`."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _format(value: Any) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class ForwardList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        if values is not None:
            tail: Node | None = None
            for value in values:
                node = Node(value)
                if tail is None:
                    self._head = node
                else:
                    tail.next = node
                tail = node

    def copy(self) -> ForwardList:
        """Return an independent list holding the same values."""
        return ForwardList(self)

    def __copy__(self) -> ForwardList:
        return self.copy()

    def _nodes(self) -> Iterator[Node]:
        """Yield every distinct node once, stopping where a cycle closes."""
        seen: set[int] = set()
        node = self._head
        while node is not None and id(node) not in seen:
            seen.add(id(node))
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, value: Any) -> bool:
        return any(data == value for data in self)

    def __getitem__(self, index: int) -> Any:
        return self.node_at(index).data

    def __str__(self) -> str:
        return " ".join(_format(value) for value in self)

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    @property
    def head(self) -> Node | None:
        """The first node, or ``None`` when the list is empty."""
        return self._head

    def is_empty(self) -> bool:
        return self._head is None

    def push_front(self, value: Any) -> None:
        self._head = Node(value, self._head)

    def pop_front(self) -> Any:
        """Remove the first element and return its value."""
        if self._head is None:
            raise IndexError("List is empty")
        node = self._head
        self._head = node.next
        return node.data

    def _last_node(self) -> Node:
        if self._head is None:
            raise IndexError("List is empty")
        if self.has_cycle():
            raise CycleError("List has no end: cycle detected")
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def push_back(self, value: Any) -> None:
        if self._head is None:
            self.push_front(value)
            return
        self._last_node().next = Node(value)

    def pop_back(self) -> Any:
        """Remove the last element and return its value."""
        if self._head is None:
            raise IndexError("List is empty")
        if self.has_cycle():
            raise CycleError("Can't pop_back: cycle detected")
        if self._head.next is None:
            value = self._head.data
            self._head = None
            return value
        node = self._head
        while node.next.next is not None:
            node = node.next
        value = node.next.data
        node.next = None
        return value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0:
            raise IndexError("Invalid index")
        if index == 0:
            self.push_front(value)
            return
        if index == len(self):
            self.push_back(value)
            return
        previous = self._head
        for _ in range(index - 1):
            if previous is None:
                break
            previous = previous.next
        if previous is None:
            raise IndexError("Invalid index")
        previous.next = Node(value, previous.next)

    def erase(self, value: Any) -> None:
        """Remove every element equal to ``value``."""
        while self._head is not None and self._head.data == value:
            self._head = self._head.next
        node = self._head
        while node is not None and node.next is not None:
            if node.next.data == value:
                node.next = node.next.next
            else:
                node = node.next

    def clear(self) -> None:
        self._head = None

    def pop_element(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        if self._head is None:
            raise IndexError("List is empty")
        if index < 0:
            raise IndexError("Invalid index")
        previous: Node | None = None
        current = self._head
        for _ in range(index):
            if current is None:
                break
            previous, current = current, current.next
        if current is None:
            raise IndexError("Invalid index")
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        return current.data

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index``."""
        if index < 0:
            raise IndexError("Invalid index")
        current = self._head
        for _ in range(index):
            if current is None:
                break
            current = current.next
        if current is None:
            raise IndexError("Invalid index")
        return current

    def print_list(self, file: TextIO | None = None) -> None:
        """Write the values separated by spaces; nothing for an empty list."""
        if self._head is None:
            return
        print("".join(f"{_format(value)} " for value in self), file=file)

    def has_cycle(self) -> bool:
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def cycle_head(self) -> Node | None:
        """Return the node where the cycle begins, or ``None`` if there is none."""
        if not self.has_cycle():
            return None
        slow = self._head.next
        fast = self._head.next.next
        while slow is not fast:
            slow = slow.next
            fast = fast.next.next
        slow = self._head
        while slow is not fast:
            slow = slow.next
            fast = fast.next
        return slow

    def cycle_length(self) -> int:
        start = self.cycle_head()
        if start is None:
            return 0
        length = 1
        node = start.next
        while node is not start:
            node = node.next
            length += 1
        return length

    def back(self) -> Any:
        """Return the value of the last element."""
        return self._last_node().data