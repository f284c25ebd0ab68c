"""Queues backed by a circular array and by a linked list."""

from collections import deque


class ArrayQueue:
    """FIFO queue of fixed capacity stored in a circular array."""

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._nums = [0] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self):
        """Maximum number of items the queue holds."""
        return len(self._nums)

    def __len__(self):
        return self._size

    def is_empty(self):
        """True when the queue holds nothing."""
        return self._size == 0

    def push(self, value):
        """Append ``value`` at the rear; a full queue ignores it. Returns whether it was stored."""
        if self._size == self.capacity:
            return False
        rear = (self._front + self._size) % self.capacity
        self._nums[rear] = value
        self._size += 1
        return True

    def pop(self):
        """Remove and return the front item; IndexError when empty."""
        value = self.peek()
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def peek(self):
        """Return the front item without removing it; IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._nums[self._front]

    def to_list(self):
        """Items from front to rear."""
        return [self._nums[(self._front + k) % self.capacity] for k in range(self._size)]


class LinkedListQueue:
    """Unbounded FIFO queue stored in a linked deque."""

    def __init__(self):
        self._data = deque()

    def __len__(self):
        return len(self._data)

    def is_empty(self):
        """True when the queue holds nothing."""
        return not self._data

    def push(self, value):
        """Append ``value`` at the rear."""
        self._data.append(value)

    def pop(self):
        """Remove and return the front item; IndexError when empty."""
        if not self._data:
            raise IndexError("queue is empty")
        return self._data.popleft()

    def peek(self):
        """Return the front item without removing it; IndexError when empty."""
        if not self._data:
            raise IndexError("queue is empty")
        return self._data[0]

    def to_list(self):
        """Items from front to rear."""
        return list(self._data)