"""Command-line demonstrations of the algorithms."""

import argparse

from .backtracking import permutations_i
from .greedy import coin_change_greedy
from .search import interactive_search
from .sorting import quick_sort


def _format(value):
    """Render nested lists as space-separated bracketed groups."""
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format(item) for item in value) + "]"
    return str(value)


def permutations_demo():
    """Print and return all permutations of a small sample."""
    nums = [1, 2, 3]
    print("全排列 I：", _format(nums))
    res = permutations_i(nums)
    print("全排列 I：", _format(res))
    return res


def sort_demo():
    """Quick-sort a sample array, print it and return it."""
    arr = [3, 1, 2, 5, 4, 10]
    quick_sort(arr, 0, len(arr) - 1)
    print("快速排序结果：", _format(arr))
    return arr


def greedy_demo():
    """Run the greedy coin change on a sample, print and return the count."""
    coins = [1, 5, 10, 25]
    amt = 63
    result = coin_change_greedy(coins, amt)
    print(result)
    return result


_DEMOS = {
    "sort": sort_demo,
    "permutations": permutations_demo,
    "greedy": greedy_demo,
    "search": interactive_search,
}


def main(argv=None):
    """Run one demonstration; the sort demo by default."""
    parser = argparse.ArgumentParser(prog="algolab", description="Algorithm demonstrations.")
    parser.add_argument("demo", nargs="?", default="sort", choices=sorted(_DEMOS))
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0