import io

import pytest

from dslab.doubly_linked import (
    DoublyLinkedList,
    EmptyListError,
    ValueNotFoundError,
    main,
)


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_append_preserves_order():
    values = [5, 3, 9, 1]
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_reversed_walks_backwards():
    values = [4, 8, 15, 16]
    items = DoublyLinkedList(values)
    assert list(reversed(items)) == values[::-1]


@pytest.mark.parametrize("target", [7, 2, 9])
def test_remove_keeps_links_consistent(target):
    values = [7, 2, 9]
    items = DoublyLinkedList(values)
    items.remove(target)
    expected = [v for v in values if v != target]
    assert list(items) == expected
    assert list(reversed(items)) == expected[::-1]
    assert len(items) == len(expected)


def test_remove_only_first_occurrence():
    items = DoublyLinkedList([1, 2, 1])
    items.remove(1)
    assert list(items) == [2, 1]


def test_remove_from_empty_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().remove(3)


def test_remove_missing_raises():
    items = DoublyLinkedList([1, 2])
    with pytest.raises(ValueNotFoundError):
        items.remove(5)
    assert list(items) == [1, 2]


def test_sort_orders_values():
    values = [9, -1, 4, 4, 0, 12, 3]
    items = DoublyLinkedList(values)
    items.sort()
    assert list(items) == sorted(values)
    assert list(reversed(items)) == sorted(values, reverse=True)


@pytest.mark.parametrize("values", [[], [42]])
def test_sort_trivial_lists(values):
    items = DoublyLinkedList(values)
    items.sort()
    assert list(items) == values


def test_append_after_remove_tail():
    items = DoublyLinkedList([1, 2])
    items.remove(2)
    items.append(3)
    assert list(items) == [1, 3]
    assert list(reversed(items)) == [3, 1]


def test_render_empty():
    assert DoublyLinkedList().render() == "List is empty."


def test_render_values():
    assert DoublyLinkedList([1, 2]).render() == "the List: 1 -> 2 -> NULL"


def test_main_add_sort_display(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n4\n1\n2\n4\n3\n5\n")
    assert code == 0
    assert "Node added." in out
    assert "List sorted." in out
    assert "the List: 2 -> 4 -> NULL" in out
    assert "Exiting program." in out


def test_main_delete_from_empty(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n5\n")
    assert "List is empty. Cannot delete." in out


def test_main_delete_missing_value(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\n3\n2\n8\n5\n")
    assert "Value not found in the list." in out


def test_main_invalid_choice_and_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "9\n")
    assert code == 0
    assert "Invalid choice." in out