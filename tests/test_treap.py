import operator

from algolab.treap import Treap


def in_order(node):
    keys = []
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        keys.append(node.key)
        node = node.right
    return keys


def heap_ordered(node, less=operator.lt):
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and less(child.priority, node.priority):
            return False
    return heap_ordered(node.left, less) and heap_ordered(node.right, less)


def test_build_shape():
    treap = Treap()
    treap.build([20, 4, 2, 8, 6, 0])
    root = treap.root()
    assert root.priority == 0
    assert root.left.priority == 2
    assert root.left.left.priority == 4
    assert root.left.left.left.priority == 20
    assert root.left.right.priority == 6
    assert root.left.right.left.priority == 8


def test_build_keys_are_positions():
    data = [20, 4, 2, 8, 6, 0]
    treap = Treap()
    treap.build(data)
    assert in_order(treap.root()) == list(range(len(data)))
    assert heap_ordered(treap.root())


def test_build_with_max_ordering():
    data = [3, 9, 1, 7]
    treap = Treap(priority_less=operator.gt)
    treap.build(data)
    assert treap.root().priority == max(data)
    assert heap_ordered(treap.root(), operator.gt)


def test_insert_shape():
    treap = Treap()
    treap.insert(0, 20)
    assert treap.root().priority == 20
    assert treap.root().key == 0
    treap.insert(1, 30)
    treap.insert(-1, 1)
    treap.insert(20, 4)
    treap.insert(-2, 0)
    assert treap.root().right.right.left.priority == 20
    assert treap.root().right.right.left.right.priority == 30
    treap.insert(21, 5)
    assert in_order(treap.root()) == sorted([0, 1, -1, 20, -2, 21])
    assert heap_ordered(treap.root())


def test_erase_removes_all_equal_keys():
    treap = Treap()
    entries = [(0, 20), (0, 30), (0, 1), (1, 4), (1, 2), (-1, 90), (-1, 100)]
    for key, priority in entries:
        treap.insert(key, priority)
    treap.erase(0)
    keys = in_order(treap.root())
    assert 0 not in keys
    assert keys == sorted(k for k, _ in entries if k != 0)
    assert heap_ordered(treap.root())


def test_minimum_after_erase():
    treap = Treap()
    for key, priority in [(1, 20), (2, 30), (-1, 1), (-2, 4), (0, 2), (20, 90), (-100, 100)]:
        treap.insert(key, priority)
    treap.erase(-100)
    treap.insert(-90, 100)
    assert treap.minimum().key == -90
    assert treap.root().priority == 1


def test_maximum():
    treap = Treap()
    for key, priority in [(5, 3), (-4, 1), (12, 8), (7, 2)]:
        treap.insert(key, priority)
    assert treap.maximum().key == 12


def test_empty_minimum_and_maximum():
    treap = Treap()
    assert treap.minimum() is None
    assert treap.maximum() is None


def test_split():
    treap = Treap()
    treap.build([20, 4, 2, 8, 6])
    left, right = treap.split(1)
    assert treap.root() is None
    assert in_order(left.root()) == [0]
    assert in_order(right.root()) == [1, 2, 3, 4]
    assert heap_ordered(right.root())


def test_merge_then_split_round_trip():
    first = Treap()
    first.build([20, 4, 2, 8, 6])
    second = Treap()
    for key, priority in [(10, 21), (11, 5), (12, 3), (13, 9), (14, 7)]:
        second.insert(key, priority)
    first.merge(second)
    assert second.root() is None
    assert in_order(first.root()) == [0, 1, 2, 3, 4, 10, 11, 12, 13, 14]
    assert heap_ordered(first.root())
    low, high = first.split(10)
    assert in_order(low.root()) == [0, 1, 2, 3, 4]
    assert in_order(high.root()) == [10, 11, 12, 13, 14]


def test_clear():
    treap = Treap()
    treap.build([1, 2, 3])
    treap.clear()
    assert treap.root() is None
    assert treap.dump() == ""


def test_dump_single():
    treap = Treap()
    treap.insert(0, 20)
    assert treap.dump() == "r: 0(20)\n"


def test_dump_tree_and_subtree():
    treap = Treap()
    treap.build([2, 1])
    assert treap.dump() == "r: 1(1)\n  L: 0(2)\n"
    assert treap.dump(treap.root().left) == "r: 0(2)\n"