"""Classic algorithms and data structures: sorting, searching, backtracking,
dynamic programming, greedy coin change, stacks, queues, hash maps, linked
lists and binary trees, with command-line demonstrations."""

__version__ = "0.1.0"