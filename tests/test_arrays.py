import pytest

from algolab.arrays import array_demo, extend, insert, random_access, remove


def test_random_access_returns_member():
    nums = [4, 8, 15, 16, 23, 42]
    for _ in range(50):
        assert random_access(nums) in nums


def test_random_access_empty():
    with pytest.raises(IndexError):
        random_access([])


def test_insert_shifts_and_drops_last():
    nums = [1, 2, 3, 4, 5]
    insert(nums, 6, 2)
    assert nums == [1, 2, 6, 3, 4]


@pytest.mark.parametrize("index", [0, 2, 4])
def test_insert_keeps_length_and_places_value(index):
    nums = [10, 20, 30, 40, 50]
    insert(nums, 99, index)
    assert len(nums) == 5
    assert nums[index] == 99


def test_insert_at_last_replaces_last():
    nums = [1, 2, 3]
    insert(nums, 7, 2)
    assert nums[:2] == [1, 2]
    assert nums[2] == 7


def test_remove_shifts_left():
    nums = [1, 2, 6, 3, 4]
    remove(nums, 2)
    assert nums == [1, 2, 3, 4, 4]


def test_remove_then_insert_round_trip_prefix():
    nums = [5, 6, 7, 8]
    remove(nums, 1)
    insert(nums, 6, 1)
    assert nums[:3] == [5, 6, 7]


@pytest.mark.parametrize("func,args", [(insert, (1, 5)), (insert, (1, -1)), (remove, (3,)), (remove, (-1,))])
def test_out_of_range_index(func, args):
    with pytest.raises(IndexError):
        func([1, 2, 3], *args)


def test_extend_pads_with_zeros():
    nums = [1, 2, 3]
    res = extend(nums, 4)
    assert res[: len(nums)] == nums
    assert res[len(nums) :] == [0] * 4
    assert nums == [1, 2, 3]


def test_extend_negative():
    with pytest.raises(ValueError):
        extend([1], -1)


def test_array_demo_result(capsys):
    result = array_demo()
    assert result == [1, 2, 3, 4, 4, 0, 0, 0, 0, 0]
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[0 0 0 0 0]"
    assert out[-1] == "[1 2 3 4 4 0 0 0 0 0]"