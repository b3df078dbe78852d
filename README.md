# dsakit

Textbook data structures and algorithms in plain Python: the classic
comparison and counting sorts, a singly linked list, stacks, queues and
bracket matching.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

Every function in `dsakit.sorting` takes any iterable, leaves it untouched
and returns a new list in ascending order:

```python
from dsakit.sorting import (
    bubble_sort, bubble_sort_adaptive, count_sort, insertion_sort,
    merge_sort, quick_sort, selection_sort,
)

merge_sort([9, 2, 56, 1, 5, 6, 2, 1])   # [1, 1, 2, 2, 5, 6, 9, 56]
insertion_sort([12, 54, 65, 23, 7, 9])  # [7, 9, 12, 23, 54, 65]
```

`bubble_sort` always makes n - 1 passes; `bubble_sort_adaptive` stops after
the first pass that makes no swap. `count_sort` works on non-negative
integers and raises `ValueError` if it meets a negative one.

## Linked list

`dsakit.linked_list` provides `Node` (a value and a link to the next node)
and `LinkedList`, whose positions are counted from 0 at the head.

```python
from dsakit.linked_list import LinkedList

items = LinkedList([7, 11, 13, 66])
items.insert_at_start(89)
items.delete_by_value(11)               # True
list(items)                             # [89, 7, 13, 66]
len(items)                              # 4
```

The insertion methods (`insert_at_start`, `insert_at_index`, `insert_at_end`,
`insert_after`) return the new `Node`. `insert_after` raises `ValueError` if
the node is not part of the list. The deletion methods `delete_first`,
`delete_at_index` and `delete_last` return the removed value and raise
`IndexError` on an empty list or a bad position; `delete_by_value` removes the
first matching node and reports whether it found one.

## Stacks

`dsakit.stacks` has a fixed-capacity `ArrayStack(size)` and an unbounded
`LinkedStack`. Both provide `push`, `pop`, `peek(position)` (position 1 is the
top), `is_empty` and `len()`; `ArrayStack` also has `is_full`, and iterating a
`LinkedStack` yields its items from top to bottom. Pushing onto a full
`ArrayStack` raises `StackOverflowError`, popping an empty stack raises
`StackUnderflowError` (a kind of `IndexError`), and peeking outside the stack
raises `IndexError`.

```python
from dsakit.stacks import LinkedStack

stack = LinkedStack()
for value in (7, 78, 90):
    stack.push(value)
stack.peek(1)                           # 90
stack.pop()                             # 90
list(stack)                             # [78, 7]
```

## Queues

`dsakit.queues` offers three queues, each with `enqueue`, `dequeue` and
`is_empty`:

- `ArrayQueue(size)` is a linear queue over a fixed array. Its slots are
  never reused: once `size` items have been enqueued it stays full, even
  after they have all been dequeued.
- `CircularQueue(size)` is a ring of `size` slots that holds at most
  `size - 1` items at once.
- `LinkedQueue` is unbounded, supports `len()` and iterates from front to rear.

The two array queues also have `is_full`. Enqueuing onto a full queue raises
`QueueFullError`; dequeuing from an empty one raises `QueueEmptyError` (a kind
of `IndexError`). A size below 1 raises `ValueError`.

```python
from dsakit.queues import LinkedQueue

queue = LinkedQueue()
for value in (7, 8, 9):
    queue.enqueue(value)
queue.dequeue()                         # 7
list(queue)                             # [8, 9]
```

## Bracket matching

```python
from dsakit.parentheses import parenthesis_match, multi_parenthesis_match

parenthesis_match("(8*(3))")                        # True
multi_parenthesis_match("{7-(3-2)+[8+(99-11)]}")    # True
multi_parenthesis_match("(]")                       # False
```

`parenthesis_match` looks at round brackets only; `multi_parenthesis_match`
checks that `()`, `[]` and `{}` are balanced and properly nested together.

## What it does not do

dsakit is a library only: it has no command-line tool, and it does not
convert infix expressions to postfix.