"""Binary search over sorted integer sequences."""

import re
import sys

_INTEGER = re.compile(r"[+-]?[0-9]+")


def binary_search(nums, target):
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    i, j = 0, len(nums) - 1
    while i <= j:
        m = i + (j - i) // 2
        if nums[m] < target:
            i = m + 1
        elif nums[m] > target:
            j = m - 1
        else:
            return m
    return -1


def binary_search_insertion_simple(nums, target):
    """Insertion point of ``target`` in sorted ``nums`` without duplicates."""
    i, j = 0, len(nums) - 1
    while i <= j:
        m = i + (j - i) // 2
        if nums[m] < target:
            i = m + 1
        elif nums[m] > target:
            j = m - 1
        else:
            return m
    return i


def binary_search_insertion(nums, target):
    """Leftmost insertion point of ``target`` in sorted ``nums``."""
    i, j = 0, len(nums) - 1
    while i <= j:
        m = i + (j - i) // 2
        if nums[m] < target:
            i = m + 1
        else:
            j = m - 1
    return i


def interactive_search(instream=None, outstream=None):
    """Prompt for a space-separated array and a target, then report the search.

    Returns the found index (or -1), or None when the input is malformed.
    """
    instream = sys.stdin if instream is None else instream
    outstream = sys.stdout if outstream is None else outstream

    outstream.write("请输入整数数组（用空格分隔）：")
    line = instream.readline().strip()
    nums = []
    for token in line.split(" "):
        if not _INTEGER.fullmatch(token):
            print("输入有误:", token, file=outstream)
            return None
        nums.append(int(token))

    outstream.write("请输入要查找的目标值：")
    target_line = instream.readline().strip()
    if not _INTEGER.fullmatch(target_line):
        print("目标值输入有误", file=outstream)
        return None
    target = int(target_line)

    result = binary_search(nums, target)
    if result != -1:
        print("Found target at index:", result, file=outstream)
    else:
        print("Target not found", file=outstream)
    return result