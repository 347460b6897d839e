# algonotes

Small, dependency-free implementations of classic problems on strings, singly
linked lists, stacks and queues. It runs on Python 3.10 and later and needs
nothing beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

The `test` extra adds pytest and hypothesis, which the test suite uses:

```
pip install ".[test]"
```

## Strings: `algonotes.strings`

```python
from algonotes.strings import is_isomorphic, is_anagram, first_unique_char

is_isomorphic("egg", "add")        # True
is_isomorphic("badc", "baba")      # False
is_anagram("anagram", "nagaram")   # True
is_anagram("rat", "car")           # False
first_unique_char("loveleetcode")  # 2
first_unique_char("aabb")          # -1
```

- `is_isomorphic(s, t)` checks for a one-to-one character mapping; strings of
  different lengths are never isomorphic.
- `is_anagram(s, t)` compares character counts, for any characters.
- `first_unique_char(s)` returns the index of the first character that occurs
  exactly once, or `-1`.

## Linked lists: `algonotes.linked_list`

`ListNode` is a singly linked node (`val`, `next`); iterating a node yields the
values from it to the end of the list. `build_list(values)` makes a chain from
any iterable and returns `None` for an empty one.

```python
from algonotes.linked_list import (
    build_list, merge_two_lists, partition, reverse_list, delete_node,
)

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list(merged)                                         # [1, 1, 2, 3, 4, 4]

list(partition(build_list([1, 4, 3, 2, 5, 2]), 3))   # [1, 2, 2, 4, 3, 5]
list(reverse_list(build_list([1, 2, 3, 4, 5])))      # [5, 4, 3, 2, 1]

head = build_list([4, 5, 1, 9])
delete_node(head.next)
list(head)                                           # [4, 1, 9]
```

- `merge_two_lists` splices two sorted lists together without copying nodes;
  on equal values the node from the second list comes first.
- `partition(head, x)` relinks nodes so those below `x` come first, keeping
  the relative order within each part.
- `reverse_list` reverses in place and returns the new head.
- `delete_node(node)` removes a node given only that node, by taking over its
  successor's value and link. It raises `ValueError` for the last node.

`RandomNode` has `val`, `next` and a `random` link to any node of the list or
`None`. `copy_random_list(head)` returns a deep copy whose `random` links
point into the copy, not the original.

## Stacks and queues: `algonotes.stacks`

```python
from algonotes.stacks import (
    is_valid_parentheses, decode_string, MinStack, StackQueue, MedianFinder,
)

is_valid_parentheses("()[]{}")   # True
is_valid_parentheses("(]")       # False
decode_string("3[a2[c]]")        # "accaccacc"
decode_string("2[abc]3[cd]ef")   # "abcabccdcdcdef"

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()                  # -3
stack.pop()
stack.top()                      # 0
stack.get_min()                  # -2
len(stack)                       # 2

queue = StackQueue()
queue.push(1)
queue.push(2)
queue.peek()                     # 1
queue.pop()                      # 1
queue.empty()                    # False

finder = MedianFinder()
finder.add_num(1)
finder.add_num(2)
finder.find_median()             # 1.5
finder.add_num(3)
finder.find_median()             # 2.0
```

- `is_valid_parentheses` treats any character other than `()[]{}` as invalid.
- `decode_string` accepts only ASCII digits, lower-case letters and square
  brackets; a group with no count is repeated zero times. It raises
  `ValueError` on any other character or on unbalanced brackets.
- `MinStack.pop`, `MinStack.top` and `MinStack.get_min` raise `IndexError` on
  an empty stack; `MinStack.pop` returns nothing.
- `StackQueue` is a FIFO queue built from two stacks; `pop` and `peek` raise
  `IndexError` when it is empty, and `len()` gives the number of elements.
- `MedianFinder.find_median` raises `IndexError` before any number is added.

## What it does not include

This is a library only: there is no command-line tool, and nothing is read
from or written to files.