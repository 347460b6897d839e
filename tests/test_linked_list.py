import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.linked_list import (
    ListNode,
    RandomNode,
    build_list,
    copy_random_list,
    delete_node,
    merge_two_lists,
    partition,
    reverse_list,
)

int_lists = st.lists(st.integers(min_value=-100, max_value=100), max_size=20)


def _values(head):
    return [] if head is None else list(head)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _random_layout(head):
    nodes = _nodes(head)
    position = {id(node): index for index, node in enumerate(nodes)}
    return [
        (node.val, None if node.random is None else position[id(node.random)])
        for node in nodes
    ]


def _build_random(values, randoms):
    nodes = [RandomNode(v) for v in values]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    for node, target in zip(nodes, randoms):
        node.random = None if target is None else nodes[target]
    return nodes[0] if nodes else None


def test_build_list_round_trip():
    assert list(build_list([1, 2, 4])) == [1, 2, 4]
    assert build_list([]) is None


def test_merge_example():
    merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
    assert list(merged) == sorted([1, 2, 4, 1, 3, 4])


def test_merge_empty_lists():
    assert merge_two_lists(None, None) is None
    single = ListNode()
    assert merge_two_lists(None, single) is single


def test_merge_ties_take_second_list_first():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


@given(int_lists, int_lists)
def test_merge_sorted_property(a, b):
    merged = merge_two_lists(build_list(sorted(a)), build_list(sorted(b)))
    assert _values(merged) == sorted(a + b)


def test_partition_example():
    head = build_list([1, 4, 3, 2, 5, 2])
    assert list(partition(head, 3)) == [1, 2, 2, 4, 3, 5]


def test_partition_two_nodes():
    head = build_list([2, 1])
    assert list(partition(head, 2)) == [1, 2]


def test_partition_empty():
    assert partition(None, 3) is None


@given(int_lists, st.integers(min_value=-100, max_value=100))
def test_partition_is_stable(values, x):
    head = build_list(values)
    original_nodes = _nodes(head)
    result = partition(head, x)
    result_values = _values(result)
    assert sorted(result_values) == sorted(values)
    low = [v for v in result_values if v < x]
    assert result_values[: len(low)] == [v for v in values if v < x]
    assert result_values[len(low):] == [v for v in values if v >= x]
    assert {id(n) for n in _nodes(result)} == {id(n) for n in original_nodes}


@pytest.mark.parametrize(
    "values, randoms",
    [
        ([7, 13, 11, 10, 1], [None, 0, 4, 2, 0]),
        ([1, 2], [1, 1]),
        ([3, 3, 3], [None, 0, None]),
    ],
)
def test_copy_random_list_examples(values, randoms):
    head = _build_random(values, randoms)
    copy = copy_random_list(head)
    assert _random_layout(copy) == list(zip(values, randoms))
    assert not {id(n) for n in _nodes(copy)} & {id(n) for n in _nodes(head)}
    assert _random_layout(head) == list(zip(values, randoms))


def test_copy_random_list_empty():
    assert copy_random_list(None) is None


@given(st.data())
def test_copy_random_list_property(data):
    values = data.draw(st.lists(st.integers(), min_size=1, max_size=15))
    randoms = data.draw(
        st.lists(
            st.one_of(st.none(), st.integers(min_value=0, max_value=len(values) - 1)),
            min_size=len(values),
            max_size=len(values),
        )
    )
    head = _build_random(values, randoms)
    copy = copy_random_list(head)
    assert _random_layout(copy) == _random_layout(head)
    assert list(copy) == values


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2]])
def test_reverse_examples(values):
    assert list(reverse_list(build_list(values))) == values[::-1]


def test_reverse_empty():
    assert reverse_list(None) is None


@given(int_lists)
def test_reverse_twice_restores(values):
    once = reverse_list(build_list(values))
    assert _values(once) == values[::-1]
    assert _values(reverse_list(once)) == values


@pytest.mark.parametrize("index", [1, 2])
def test_delete_node_examples(index):
    values = [4, 5, 1, 9]
    head = build_list(values)
    delete_node(_nodes(head)[index])
    assert list(head) == values[:index] + values[index + 1:]


def test_delete_last_node_raises():
    head = build_list([4, 5])
    with pytest.raises(ValueError):
        delete_node(head.next)


def test_iterating_random_node_yields_values():
    head = _build_random([7, 13], [None, 0])
    assert list(head) == [7, 13]