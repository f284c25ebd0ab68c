import bisect
import io

import pytest

from algolab.search import (
    binary_search,
    binary_search_insertion,
    binary_search_insertion_simple,
    interactive_search,
)

SORTED = [1, 3, 6, 8, 12, 15, 23, 26, 31, 35]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("target", [0, 2, 7, 36, -5])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@pytest.mark.parametrize("target", range(-1, 38))
def test_insertion_simple_matches_bisect(target):
    assert binary_search_insertion_simple(SORTED, target) == bisect.bisect_left(SORTED, target)


@pytest.mark.parametrize("target", range(0, 8))
def test_insertion_with_duplicates_is_leftmost(target):
    nums = [1, 2, 2, 2, 4, 4, 6]
    assert binary_search_insertion(nums, target) == bisect.bisect_left(nums, target)


def _run(text):
    out = io.StringIO()
    result = interactive_search(io.StringIO(text), out)
    return result, out.getvalue()


def test_interactive_found():
    result, output = _run("1 3 5 7\n5\n")
    assert result == 2
    assert "Found target at index: 2" in output


def test_interactive_not_found():
    result, output = _run("1 3 5 7\n4\n")
    assert result == -1
    assert output.endswith("Target not found\n")


def test_interactive_bad_array_token():
    result, output = _run("1 x 3\n3\n")
    assert result is None
    assert "输入有误: x" in output
    assert "请输入要查找的目标值" not in output


def test_interactive_bad_target():
    result, output = _run("1 2 3\nabc\n")
    assert result is None
    assert output.endswith("目标值输入有误\n")


def test_interactive_signed_numbers():
    result, output = _run("-3 -1 +4\n-1\n")
    assert result == binary_search([-3, -1, 4], -1)
    assert "Found target at index:" in output