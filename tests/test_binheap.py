import random

import pytest

from algolab.binheap import BinomialHeap, BinomialNode, HeapError


@pytest.fixture
def heap():
    h = BinomialHeap()
    for key in (3, 4, 8, 5):
        h.insert(key)
    return h


def test_insert_and_minimum(heap):
    assert heap.minimum().key == 3
    heap.insert(2)
    assert heap.minimum().key == 2
    heap.insert(8)
    heap.insert(10)
    heap.insert(1)
    assert heap.minimum().key == 1
    heap.insert(1)
    assert heap.minimum().key == 1
    heap.insert(-100)
    assert heap.minimum().key == -100


def test_extract_minimum(heap):
    assert heap.extract_minimum().key == 3
    heap.insert(7)
    assert heap.extract_minimum().key == 4
    heap.insert(2)
    assert heap.extract_minimum().key == 2
    heap.insert(1)
    assert heap.extract_minimum().key == 1
    heap.insert(-5)
    assert heap.extract_minimum().key == -5
    heap.extract_minimum()
    heap.extract_minimum()
    heap.extract_minimum()
    with pytest.raises(HeapError):
        heap.extract_minimum()


def test_decrease_key(heap):
    heap.decrease_key(heap.minimum(), 2)
    assert heap.minimum().key == 2
    node = heap.minimum()
    heap.insert(0)
    heap.insert(-2)
    heap.insert(10)
    heap.insert(-1)
    heap.decrease_key(node, 1)
    heap.extract_minimum()
    heap.extract_minimum()
    heap.extract_minimum()
    assert heap.minimum().key == 1
    with pytest.raises(HeapError):
        heap.decrease_key(None, 3)


def test_erase(heap):
    heap.erase(heap.minimum())
    heap.erase(heap.minimum())
    heap.erase(heap.minimum())
    assert heap.minimum().key == 8
    heap.erase(heap.minimum())
    with pytest.raises(HeapError):
        heap.erase(heap.minimum())


def test_many_inserts(heap):
    for i in range(1, 20000):
        heap.insert(2 * i)
    assert heap.minimum().key == 2
    assert [heap.extract_minimum().key for _ in range(5)] == [2, 3, 4, 4, 5]


def test_extraction_is_sorted():
    rng = random.Random(7)
    values = [rng.randint(-1000, 1000) for _ in range(500)]
    h = BinomialHeap()
    for v in values:
        h.insert(v)
    out = []
    while h:
        out.append(h.extract_minimum().key)
    assert out == sorted(values)


def test_custom_order_and_data():
    h = BinomialHeap(less=lambda a, b: a > b)
    h.insert(1, "one")
    h.insert(9, "nine")
    h.insert(5, "five")
    node = h.extract_minimum()
    assert (node.key, node.data) == (9, "nine")
    assert h.minimum().data == "five"


def test_decrease_key_larger_is_ignored(heap):
    node = heap.minimum()
    heap.decrease_key(node, 100)
    assert heap.minimum().key == 3


def test_insert_node_reuses_node():
    h = BinomialHeap()
    node = BinomialNode(7, "x")
    h.insert_node(node)
    h.insert(9)
    assert h.extract_minimum() is node


def test_dump():
    h = BinomialHeap()
    assert h.dump() == "Empty\n"
    h.insert(3)
    h.insert(4)
    assert h.dump() == "3\n  4\n"