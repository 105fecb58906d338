# dsakit

Compact, plain-Python implementations of the data structures and algorithms
that come up first in any course on the subject. There are no runtime
dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Contents

| Module | What it offers |
| --- | --- |
| `dsakit.arithmetic` | `factorial`, `factorial_table`, `fibonacci`, `divisor_sum`, `is_perfect`, `perfect_numbers`, `cube_digit_sum`, `is_armstrong`, `armstrong_numbers`, `binary_to_decimal`, `count_digits`, `is_prime`, `reverse_number`, `digit_factorial_sum`, `is_strong`, `strong_numbers`, `digit_sum`, `multiplication_table` |
| `dsakit.arrays` | `contains`, `insert_at`, `append`, `delete_at`, `delete_last`, `format_items` on mutable sequences |
| `dsakit.strings` | `concat`, `copy`, `reverse_string`, `permutations` |
| `dsakit.sorting` | `bubble_sort`, `optimised_bubble_sort`, `selection_sort`, `partition`, `quick_sort` |
| `dsakit.linked_list` | `Node`, `LinkedList`, `merge_sorted` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `is_balanced`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.array_queue` | `ArrayQueue`, `QueueOverflowError`, `QueueUnderflowError` |
| `dsakit.graphs` | `AdjacencyList`, `AdjacencyMatrix` for undirected graphs |
| `dsakit.trees` | `TreeNode`, `count_nodes`, `max_depth`, `min_depth`, `preorder`, `inorder`, `postorder` |

## Examples

```python
from dsakit.arithmetic import factorial, fibonacci, is_armstrong, strong_numbers
from dsakit.sorting import quick_sort
from dsakit.linked_list import LinkedList, merge_sorted
from dsakit.stacks import ArrayStack, is_balanced
from dsakit.array_queue import ArrayQueue
from dsakit.graphs import AdjacencyMatrix
from dsakit.trees import TreeNode, inorder, max_depth

factorial(5)             # 120
fibonacci(5)             # [0, 1, 1, 2, 3, 5]
is_armstrong(153)        # True
strong_numbers(1000)     # [1, 2, 145]

quick_sort([5, 7, 1, 6, 9, 3, 2, 4])   # [1, 2, 3, 4, 5, 6, 7, 9]

numbers = LinkedList([1, 2, 3, 4, 5])
numbers.push_back(6)
numbers.reverse()
str(numbers)             # "6->5->4->3->2->1->NULL"
list(merge_sorted([1, 3, 5], [2, 4]))  # [1, 2, 3, 4, 5]

stack = ArrayStack(10)
stack.push(10)
stack.pop()              # 10
is_balanced("([]{})")    # True

queue = ArrayQueue(5)
queue.enqueue(10)
str(queue)               # "Queue: 10"

graph = AdjacencyMatrix(4)
graph.add_edge(0, 1)
graph.rows()[0]          # [0, 1, 0, 0]

root = TreeNode(10, TreeNode(20), TreeNode(30))
inorder(root)            # [20, 10, 30]
max_depth(root)          # 2
```

## Behaviour worth knowing

- The sorting functions take any iterable and return a new sorted list;
  `partition` works in place on `items[low:high + 1]` around `items[high]`
  and raises `IndexError` for a range outside the sequence.
- `permutations` is a generator that yields arrangements in swap order.
  Repeated characters give repeated results; an empty string yields nothing.
- `is_balanced` treats `(`, `[` and `{` as opening brackets and every other
  character as closing the most recent open one, whatever its kind.
- `count_digits(0)` is 0, and `binary_to_decimal` weights each decimal digit
  by a power of two without checking that it is 0 or 1.
- `ArrayQueue` never reuses slots freed at the front until it becomes empty
  again, so it can report overflow while holding fewer items than its
  capacity.
- `AdjacencyList.neighbours` lists the most recently connected vertex first.
- Errors are raised, not printed: `IndexError` for bad positions and empty
  lists, `StackOverflowError` / `StackUnderflowError` for stacks, and
  `QueueOverflowError` / `QueueUnderflowError` for the queue.

## What it does not do

dsakit is a library only. It has no command-line program and does not prompt
for input or print results; every routine returns its result as a value or
string for the caller to use.