import pytest

from dslab.singly_linked import SinglyLinkedList, main


def test_push_front_reverses_order():
    values = [10, 20, 30]
    items = SinglyLinkedList()
    for value in values:
        items.push_front(value)
    assert list(items) == values[::-1]
    assert len(items) == len(values)


def test_pop_front_returns_latest():
    values = [1, 2, 3]
    items = SinglyLinkedList()
    for value in values:
        items.push_front(value)
    assert [items.pop_front() for _ in values] == values[::-1]
    assert len(items) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().pop_front()


def test_render_empty():
    assert SinglyLinkedList().render() == "NULL"


def test_render_matches_iteration():
    items = SinglyLinkedList()
    for value in (4, 5):
        items.push_front(value)
    assert items.render() == " -> ".join(str(v) for v in items) + " -> NULL"


def test_main_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "30 -> 20 -> 10 -> NULL" in out
    assert "\n20 -> 10 -> NULL" in out