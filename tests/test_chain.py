import pytest

from solong.chain import Chain, Node


def test_append_keeps_order_and_length():
    chain = Chain()
    chain.append("a")
    chain.append("b")
    chain.append("c")
    assert list(chain) == ["a", "b", "c"]
    assert len(chain) == 3


def test_constructor_takes_iterable():
    chain = Chain(["x", "y"])
    assert list(chain) == ["x", "y"]


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert chain.last() is None
    assert chain.head is None
    assert list(chain) == []


def test_prepend_puts_value_first():
    chain = Chain(["b", "c"])
    node = chain.prepend("a")
    assert chain.head is node
    assert list(chain) == ["a", "b", "c"]
    assert node.next.prev is node


def test_prepend_on_empty_sets_last():
    chain = Chain()
    node = chain.prepend(5)
    assert chain.last() is node
    assert len(chain) == 1


def test_last_returns_final_node():
    chain = Chain([1, 2, 3])
    assert chain.last().value == 3
    assert chain.last().next is None


def test_links_are_consistent_both_ways():
    chain = Chain(["r0", "r1", "r2"])
    forward = []
    node = chain.head
    while node is not None:
        forward.append(node.value)
        node = node.next
    backward = []
    node = chain.last()
    while node is not None:
        backward.append(node.value)
        node = node.prev
    assert forward == list(reversed(backward))


def test_remove_middle_calls_on_delete():
    chain = Chain(["a", "b", "c"])
    middle = chain.head.next
    deleted = []
    chain.remove(middle, deleted.append)
    assert deleted == ["b"]
    assert list(chain) == ["a", "c"]
    assert chain.head.next.prev is chain.head
    assert len(chain) == 2


def test_remove_head_and_tail():
    chain = Chain([1, 2, 3])
    chain.remove(chain.head)
    chain.remove(chain.last())
    assert list(chain) == [2]
    assert chain.head is chain.last()


def test_remove_foreign_node_raises():
    chain = Chain([1])
    with pytest.raises(ValueError):
        chain.remove(Node(1))


def test_clear_calls_on_delete_in_order():
    chain = Chain(["a", "b", "c"])
    seen = []
    chain.clear(seen.append)
    assert seen == ["a", "b", "c"]
    assert len(chain) == 0
    assert chain.head is None and chain.last() is None


def test_for_each_visits_every_value():
    chain = Chain([1, 2, 3])
    seen = []
    chain.for_each(seen.append)
    assert seen == list(chain)


def test_map_builds_new_chain():
    chain = Chain(["ab", "cde"])
    lengths = chain.map(len)
    assert list(lengths) == [2, 3]
    assert list(chain) == ["ab", "cde"]
    assert lengths is not chain


def test_map_propagates_errors():
    chain = Chain([1, 0])
    with pytest.raises(ZeroDivisionError):
        chain.map(lambda v: 1 // v)