"""In-place comparison sorts over mutable sequences."""


def bubble_sort(arr):
    """Sort ``arr`` in place by repeatedly swapping adjacent out-of-order items."""
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(arr):
    """Sort ``arr`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(arr)):
        base = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > base:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = base


def selection_sort(arr):
    """Sort ``arr`` in place by moving the smallest remaining item to the front."""
    n = len(arr)
    for i in range(n - 1):
        min_index = min(range(i, n), key=arr.__getitem__)
        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]


def _merge(nums, left, mid, right):
    """Merge the sorted runs ``nums[left:mid+1]`` and ``nums[mid+1:right+1]``."""
    left_run = nums[left : mid + 1]
    right_run = nums[mid + 1 : right + 1]
    merged = []
    i = j = 0
    while i < len(left_run) and j < len(right_run):
        if left_run[i] <= right_run[j]:
            merged.append(left_run[i])
            i += 1
        else:
            merged.append(right_run[j])
            j += 1
    merged.extend(left_run[i:])
    merged.extend(right_run[j:])
    nums[left : right + 1] = merged


def merge_sort(nums, left=0, right=None):
    """Stable in-place merge sort of the closed range ``[left, right]``."""
    if right is None:
        right = len(nums) - 1
    if left >= right:
        return
    mid = left + (right - left) // 2
    merge_sort(nums, left, mid)
    merge_sort(nums, mid + 1, right)
    _merge(nums, left, mid, right)


def _partition(arr, left, right):
    """Partition around ``arr[left]`` and return the pivot's final index."""
    pivot = left
    i, j = left, right
    while i < j:
        # The right pointer must move first so that i stops on an item <= pivot.
        while i < j and arr[j] >= arr[pivot]:
            j -= 1
        while i < j and arr[i] <= arr[pivot]:
            i += 1
        arr[i], arr[j] = arr[j], arr[i]
    arr[pivot], arr[i] = arr[i], arr[pivot]
    return i


def quick_sort(arr, left=0, right=None):
    """In-place quick sort of the closed range ``[left, right]``."""
    if right is None:
        right = len(arr) - 1
    if left < right:
        pivot = _partition(arr, left, right)
        quick_sort(arr, left, pivot - 1)
        quick_sort(arr, pivot + 1, right)