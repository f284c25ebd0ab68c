"""Binary trees: linked nodes and the array (heap-index) representation."""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def level_order(root):
    """Values in breadth-first order."""
    res = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        res.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return res


def _pre(node):
    if node is None:
        return
    yield node.val
    yield from _pre(node.left)
    yield from _pre(node.right)


def _in(node):
    if node is None:
        return
    yield from _in(node.left)
    yield node.val
    yield from _in(node.right)


def _post(node):
    if node is None:
        return
    yield from _post(node.left)
    yield from _post(node.right)
    yield node.val


def pre_order(root):
    """Values in root, left, right order."""
    return list(_pre(root))


def in_order(root):
    """Values in left, root, right order."""
    return list(_in(root))


def post_order(root):
    """Values in left, right, root order."""
    return list(_post(root))


class _Order(Enum):
    PRE = "pre"
    IN = "in"
    POST = "post"


class ArrayBinaryTree:
    """Binary tree stored level by level in a list, with None for empty slots."""

    def __init__(self, tree):
        self._tree = list(tree)

    def __len__(self):
        return len(self._tree)

    def val(self, i):
        """Value at index ``i``, or None for an empty or out-of-range slot."""
        if i < 0 or i >= len(self._tree):
            return None
        return self._tree[i]

    def left(self, i):
        """Index of the left child of ``i``."""
        return 2 * i + 1

    def right(self, i):
        """Index of the right child of ``i``."""
        return 2 * i + 2

    def parent(self, i):
        """Index of the parent of ``i``; the root is its own parent."""
        return (i - 1) // 2 if i > 0 else 0

    def level_order(self):
        """Values of occupied slots in index order."""
        return [v for v in self._tree if v is not None]

    def _dfs(self, i, order):
        value = self.val(i)
        if value is None:
            return
        if order is _Order.PRE:
            yield value
        yield from self._dfs(self.left(i), order)
        if order is _Order.IN:
            yield value
        yield from self._dfs(self.right(i), order)
        if order is _Order.POST:
            yield value

    def pre_order(self):
        """Values in root, left, right order."""
        return list(self._dfs(0, _Order.PRE))

    def in_order(self):
        """Values in left, root, right order."""
        return list(self._dfs(0, _Order.IN))

    def post_order(self):
        """Values in left, right, root order."""
        return list(self._dfs(0, _Order.POST))