# pimplstack

A last-in, first-out stack. You choose its storage when you create it, and
the code that uses the stack does not change:

- `StackContainer.VECTOR` keeps values in a dynamic array. This is the default.
- `StackContainer.LIST` keeps values in a singly linked `ForwardList`.

The package also provides `ForwardList` on its own. It is a singly linked
list with index access, insertion, removal and cycle detection.

This is a library only. It has no command-line program.

## Installation

```
pip install .
```

To install the test dependencies, run `pip install .[test]`.

## Using the stack

```python
from pimplstack.stack import Stack, StackContainer

stack = Stack([1.0, 2.0, 3.0], StackContainer.LIST)
stack.push(4.0)
print(stack.top())       # 4.0
print(stack.pop())       # 4.0
print(len(stack))        # 3
print(stack.is_empty())  # False
print(stack.container)   # StackContainer.LIST

clone = stack.copy()     # an independent copy on the same kind of storage
```

- The first argument is an optional iterable. Its values are pushed in order.
- `pop()` removes the top value and returns it.
- On an empty stack, `pop()` and `top()` raise `IndexError`.
- An unknown container kind raises `ValueError`.
- The stack is falsy when it is empty.
- `copy.copy(stack)` gives the same result as `stack.copy()`.

The storage back ends are in `pimplstack.implementations`. They are
`StackVector` and `StackList`, and both follow the abstract
`StackImplementation` interface. You can also use them directly. Each one
provides `push`, `pop`, `top`, `is_empty`, `len()` and `copy`.

## Using the forward list

```python
from pimplstack.forward_list import ForwardList

items = ForwardList([1.0, 2.0, 3.0])
items.push_front(0.0)
items.insert(2, 1.5)
items.erase(2.0)              # removes every occurrence
print(list(items))            # [0.0, 1.0, 1.5, 3.0]
print(items[1])               # 1.0
print(items.back())           # 3.0
print(str(items))             # 0 1 1.5 3
items.print_list()            # 0 1 1.5 3 (with a trailing space)
print(1.5 in items)           # True
print(items.has_cycle())      # False
```

What the list provides:

- **Adding:** `push_front`, `push_back`, `insert`.
- **Removing:** `pop_front`, `pop_back` and `pop_element(index)`. Each returns the removed value.
- **Clearing:** `erase(value)` and `clear()`.
- **Reading:** indexing, `back()`, `len()` and iteration.
- **Nodes:** `node_at(index)` returns the `Node` at that position. The `head` property returns the first `Node`.
- **Printing:** `print_list(file=None)` writes the values separated by spaces. It writes nothing for an empty list.

Cycle detection:

- `has_cycle()` reports whether the list contains a cycle.
- `cycle_head()` returns the node where the cycle begins, or `None` if there is no cycle.
- `cycle_length()` returns the number of nodes in the cycle, or `0` if there is none.
- Iteration and `len()` visit each node once, so they stop where a cycle closes.

Errors:

- A negative or out-of-range index raises `IndexError`.
- Removing from an empty list raises `IndexError`.
- `pop_back()`, `push_back()` and `back()` raise `CycleError`, a subclass of `RuntimeError`, when the list contains a cycle.

## Running the tests

```
pytest
```