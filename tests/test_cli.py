import io

import pytest

from algolab.backtracking import permutations_i
from algolab.cli import greedy_demo, main, permutations_demo, sort_demo


def test_sort_demo_output(capsys):
    result = sort_demo()
    assert result == sorted([3, 1, 2, 5, 4, 10])
    assert capsys.readouterr().out == "快速排序结果： [1 2 3 4 5 10]\n"


def test_greedy_demo_output(capsys):
    result = greedy_demo()
    assert capsys.readouterr().out == f"{result}\n"
    assert result == 6


def test_permutations_demo_output(capsys):
    result = permutations_demo()
    assert result == permutations_i([1, 2, 3])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "全排列 I： [1 2 3]"
    assert lines[1].startswith("全排列 I： [[1 2 3] [1 3 2]")
    assert lines[1].count("[") == len(result) + 1


def test_main_defaults_to_sort(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("快速排序结果：")


def test_main_greedy(capsys):
    assert main(["greedy"]) == 0
    assert capsys.readouterr().out.strip() == str(greedy_demo.__call__() if False else 6)


def test_main_search(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 4 6\n6\n"))
    assert main(["search"]) == 0
    assert "Found target at index:" in capsys.readouterr().out


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonexistent"])