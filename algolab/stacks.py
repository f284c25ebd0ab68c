"""Stacks backed by a dynamic array and by a linked list."""

from collections import deque


class ArrayStack:
    """LIFO stack stored in a Python list."""

    def __init__(self):
        self._data = []

    def __len__(self):
        return len(self._data)

    def is_empty(self):
        """True when the stack holds nothing."""
        return not self._data

    def push(self, value):
        """Place ``value`` on top."""
        self._data.append(value)

    def pop(self):
        """Remove and return the top item; IndexError when empty."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def peek(self):
        """Return the top item without removing it; IndexError when empty."""
        if not self._data:
            raise IndexError("peek at empty stack")
        return self._data[-1]

    def to_list(self):
        """Items from bottom to top."""
        return list(self._data)


class LinkedListStack:
    """LIFO stack stored in a linked deque."""

    def __init__(self):
        self._data = deque()

    def __len__(self):
        return len(self._data)

    def is_empty(self):
        """True when the stack holds nothing."""
        return not self._data

    def push(self, value):
        """Place ``value`` on top."""
        self._data.append(value)

    def pop(self):
        """Remove and return the top item; IndexError when empty."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def peek(self):
        """Return the top item without removing it; IndexError when empty."""
        if not self._data:
            raise IndexError("peek at empty stack")
        return self._data[-1]

    def to_list(self):
        """Items from bottom to top."""
        return list(self._data)