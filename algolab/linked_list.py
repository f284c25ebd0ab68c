"""Singly linked list with tail pointer, and an interactive demonstration."""

import re
import sys
from dataclasses import dataclass
from typing import Optional

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class ListNode:
    """A node holding a value and the next node."""

    val: int
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list that appends at the tail."""

    def __init__(self):
        self.head = None
        self.tail = None
        self._count = 0

    def __len__(self):
        return self._count

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def is_empty(self):
        """True when the list holds nothing."""
        return self._count == 0

    def append(self, val):
        """Add ``val`` at the tail."""
        node = ListNode(val)
        if self.head is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self._count += 1

    def delete(self, val):
        """Remove the first node holding ``val``; ValueError when absent."""
        prev = None
        node = self.head
        while node is not None and node.val != val:
            prev, node = node, node.next
        if node is None:
            raise ValueError(f"{val} not in list")
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        if node is self.tail:
            self.tail = prev
        self._count -= 1

    def search(self, val):
        """True when some node holds ``val``."""
        return any(item == val for item in self)

    def clear(self):
        """Drop every node."""
        self.head = self.tail = None
        self._count = 0


def _read_int(instream):
    """Read a line as an integer; anything unparsable counts as 0."""
    text = instream.readline().rstrip("\r\n")
    return int(text) if _INTEGER.fullmatch(text) else 0


def list_demo(instream=None, outstream=None):
    """Read ten values, then one to delete and one to search for, reporting each step."""
    instream = sys.stdin if instream is None else instream
    outstream = sys.stdout if outstream is None else outstream

    items = LinkedList()
    for _ in range(10):
        print("Enter the data:", file=outstream)
        items.append(_read_int(instream))

    print("Enter the data to delete:", file=outstream)
    try:
        items.delete(_read_int(instream))
    except ValueError:
        print("Not found, can't delete.", file=outstream)
    else:
        print("Done", file=outstream)

    print("Enter the data to search:", file=outstream)
    print("Found it." if items.search(_read_int(instream)) else "Not found.", file=outstream)

    items.clear()