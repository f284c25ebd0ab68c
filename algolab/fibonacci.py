"""Fibonacci numbers."""


def fibonacci(n):
    """Return the ``n``-th Fibonacci number; 0 for ``n <= 0``."""
    if n <= 0:
        return 0
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b