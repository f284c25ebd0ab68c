"""Fixed-length array operations: access, shift-insert, shift-remove, grow."""

import random


def _format(seq):
    return "[" + " ".join(str(x) for x in seq) + "]"


def random_access(nums):
    """Return an element of ``nums`` chosen at random."""
    if not nums:
        raise IndexError("cannot access an empty array")
    return random.choice(nums)


def _check_index(nums, index):
    if not 0 <= index < len(nums):
        raise IndexError("array index out of range")


def insert(nums, num, index):
    """Insert ``num`` at ``index`` in place, dropping the last element to keep the length."""
    _check_index(nums, index)
    nums[index + 1 :] = nums[index:-1]
    nums[index] = num


def remove(nums, index):
    """Remove the element at ``index`` in place; the last slot keeps its old value."""
    _check_index(nums, index)
    nums[index:-1] = nums[index + 1 :]


def extend(nums, enlarge):
    """Return a copy of ``nums`` padded with ``enlarge`` zeros."""
    if enlarge < 0:
        raise ValueError("enlarge must not be negative")
    return list(nums) + [0] * enlarge


def array_demo():
    """Print a walk through the array operations and return the final array."""
    print(_format([0] * 5))
    print(_format([1, 2, 3, 4, 5]))

    nums = [1, 2, 3, 4, 5]
    print(_format(nums))
    print(len(nums))
    nums.append(6)
    print(len(nums))

    array = [1, 2, 3, 4, 5]
    insert(array, 6, 2)
    print(_format(array))
    remove(array, 2)
    print(_format(array))
    array = extend(array, 5)
    print(_format(array))
    return array