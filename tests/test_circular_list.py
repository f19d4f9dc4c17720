import pytest

from dstextbook.circular_list import CircularLinkedList, CircularNode


def _is_circular(cl):
    node = cl.head
    for _ in list(cl):
        node = node.link
    return node is cl.head


def test_empty():
    cl = CircularLinkedList()
    assert str(cl) == "CL = ()"
    assert cl.search("월") is None


def test_scenario():
    cl = CircularLinkedList()
    cl.insert_first("월")
    assert cl.head.link is cl.head
    cl.insert_middle(cl.search("월"), "수")
    cl.insert_middle(cl.search("수"), "금")
    assert list(cl) == ["월", "수", "금"]
    cl.delete(cl.search("수"))
    assert list(cl) == ["월", "금"]
    assert str(cl) == "CL = (월, 금)"
    assert _is_circular(cl)


def test_insert_first_keeps_ring():
    cl = CircularLinkedList(["수", "금"])
    cl.insert_first("월")
    assert list(cl) == ["월", "수", "금"]
    assert _is_circular(cl)


def test_delete_head_moves_head():
    cl = CircularLinkedList(["월", "수", "금"])
    cl.delete(cl.head)
    assert list(cl) == ["수", "금"]
    assert _is_circular(cl)


def test_delete_single_node_empties():
    cl = CircularLinkedList(["월"])
    cl.delete(None)
    assert list(cl) == []


def test_delete_foreign_node_raises():
    cl = CircularLinkedList(["월", "수"])
    with pytest.raises(ValueError):
        cl.delete(CircularNode("수"))


def test_insert_middle_requires_pre():
    cl = CircularLinkedList(["월"])
    with pytest.raises(ValueError):
        cl.insert_middle(None, "수")