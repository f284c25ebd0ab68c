import io

import pytest

from algolab.linked_list import LinkedList, ListNode, list_demo


def make_list(values):
    items = LinkedList()
    for v in values:
        items.append(v)
    return items


def test_append_preserves_order():
    items = make_list([3, 1, 4, 1, 5])
    assert list(items) == [3, 1, 4, 1, 5]
    assert len(items) == 5
    assert items.tail.val == 5


def test_empty_list():
    items = LinkedList()
    assert items.is_empty()
    assert list(items) == []
    assert len(items) == 0


def test_delete_middle():
    items = make_list([1, 2, 3])
    items.delete(2)
    assert list(items) == [1, 3]
    assert len(items) == 2


def test_delete_head():
    items = make_list([1, 2, 3])
    items.delete(1)
    assert list(items) == [2, 3]
    assert items.head.val == 2


def test_delete_tail_then_append():
    items = make_list([1, 2, 3])
    items.delete(3)
    assert items.tail.val == 2
    items.append(9)
    assert list(items) == [1, 2, 9]


def test_delete_only_element_then_append():
    items = make_list([7])
    items.delete(7)
    assert items.is_empty()
    items.append(8)
    assert list(items) == [8]


def test_delete_removes_first_match_only():
    items = make_list([4, 5, 4])
    items.delete(4)
    assert list(items) == [5, 4]


def test_delete_missing_raises():
    items = make_list([1, 2])
    with pytest.raises(ValueError):
        items.delete(3)
    assert list(items) == [1, 2]


def test_search():
    items = make_list([10, 20, 30])
    assert items.search(20) is True
    assert items.search(25) is False


def test_clear():
    items = make_list([1, 2, 3])
    items.clear()
    assert items.is_empty()
    assert items.head is None and items.tail is None


def test_list_node_links():
    node = ListNode(1, ListNode(2))
    assert node.next.val == 2
    assert node.next.next is None


def _run_demo(lines):
    out = io.StringIO()
    list_demo(io.StringIO("\n".join(lines) + "\n"), out)
    return out.getvalue()


def test_demo_delete_and_find():
    output = _run_demo([str(n) for n in range(1, 11)] + ["5", "7"])
    assert output.count("Enter the data:") == 10
    assert "Done" in output
    assert output.rstrip().endswith("Found it.")


def test_demo_reports_missing():
    output = _run_demo([str(n) for n in range(1, 11)] + ["42", "5"])
    assert "Not found, can't delete." in output
    assert "Found it." in output


def test_demo_search_after_delete_misses():
    output = _run_demo([str(n) for n in range(1, 11)] + ["5", "5"])
    assert "Done" in output
    assert output.rstrip().endswith("Not found.")


def test_demo_unparsable_input_reads_as_zero():
    output = _run_demo(["x"] * 10 + ["0", "0"])
    assert "Done" in output
    assert output.rstrip().endswith("Found it.")