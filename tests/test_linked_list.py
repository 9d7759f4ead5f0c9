import io

import pytest

from dstructs.linked_list import LinkedList, main


def build(*values):
    linked = LinkedList()
    for value in values:
        linked.insert(value)
    return linked


def test_new_list_is_empty():
    linked = LinkedList()
    assert len(linked) == 0
    assert list(linked) == []
    assert linked.format() == ""


def test_insert_appends_in_order():
    linked = build(3, 1, 2)
    assert list(linked) == [3, 1, 2]
    assert len(linked) == 3


def test_add_to_head_prepends():
    linked = build(2, 3)
    linked.add_to_head(1)
    assert list(linked) == [1, 2, 3]
    assert len(linked) == 3


def test_add_to_head_on_empty_list():
    linked = LinkedList()
    linked.add_to_head(7)
    linked.insert(8)
    assert list(linked) == [7, 8]


def test_delete_head_middle_and_tail():
    linked = build(1, 2, 3, 4)
    linked.delete(1)
    assert list(linked) == [2, 3, 4]
    linked.delete(3)
    assert list(linked) == [2, 4]
    linked.delete(4)
    assert list(linked) == [2]
    assert len(linked) == 1


def test_delete_removes_only_first_match():
    linked = build(5, 6, 5)
    linked.delete(5)
    assert list(linked) == [6, 5]


def test_delete_missing_raises():
    linked = build(1, 2)
    with pytest.raises(ValueError, match="찾지 못했습니다"):
        linked.delete(9)
    assert list(linked) == [1, 2]


def test_delete_from_empty_raises():
    with pytest.raises(ValueError, match="비어 있어서"):
        LinkedList().delete(1)


def test_sort_orders_items():
    values = [4, 2, 9, 1, 7, 2]
    linked = build(*values)
    linked.sort()
    assert list(linked) == sorted(values)
    assert len(linked) == len(values)


def test_sort_then_insert_appends_at_end():
    linked = build(3, 1, 2)
    linked.sort()
    linked.insert(0)
    assert list(linked) == [1, 2, 3, 0]


def test_sort_short_lists_unchanged():
    single = build(5)
    single.sort()
    assert list(single) == [5]
    empty = LinkedList()
    empty.sort()
    assert list(empty) == []


def test_format_lines():
    assert build(1, 2).format() == "Data: 1\nData: 2"


def test_main_reads_until_q(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 abc 2\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "숫자만 입력 가능합니다." in out
    assert out.endswith("Data: 1\nData: 2\nData: 3\n")


def test_main_rejects_zero_and_stops_at_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 12abc"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("숫자만 입력 가능합니다.") == 1
    assert out.endswith("Data: 12\n")