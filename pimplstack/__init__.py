"""A stack over interchangeable storage back ends, and a singly linked list."""

__version__ = "0.1.0"
__all__ = ["forward_list", "implementations", "stack"]