# dstextbook

Small, readable implementations of the data structures and algorithms
taught in an introductory course: linked lists, stacks, queues, binary
trees, heaps, graphs, shortest paths and sorting. Several functions also
return the intermediate states they pass through (`*_steps`, `*_trace`),
so each stage of an algorithm can be inspected.

There are no third-party dependencies.

## Contents

| Module | What it holds |
| --- | --- |
| `dstextbook.recursion` | `string_length`, `enumerate_3d`, `format_students`, `factorial`, `factorial_trace`, `fibo`, `fibonacci_series`, `hanoi_moves` |
| `dstextbook.ordered_array` | `insert_element` / `delete_element` on a list of at most 10 elements, returning the number of shifted elements; `CapacityError` |
| `dstextbook.linked_list` | `ListNode`, `LinkedList` with `insert_first`, `insert_middle`, `insert_last`, `delete`, `search`, `reverse`, `clear` |
| `dstextbook.circular_list` | `CircularNode`, `CircularLinkedList` with `insert_first`, `insert_middle`, `delete`, `search` |
| `dstextbook.double_list` | `DoubleNode`, `DoublyLinkedList` with `insert`, `delete`, `search` |
| `dstextbook.polynomial` | `Term`, `Polynomial` (terms in append order, `+` adds), `add_poly` |
| `dstextbook.stacks` | `ArrayStack` (bounded, default 100), `LinkedStack`; `StackEmptyError`, `StackFullError` |
| `dstextbook.brackets` | `test_pair`: whether `()`, `[]` and `{}` in an expression match |
| `dstextbook.postfix` | `eval_postfix`: single-digit postfix expressions with `+ - * /`, division truncating toward zero |
| `dstextbook.queues` | `ArrayQueue`, `CircularQueue` (both bounded, default 4), `LinkedQueue`, `Deque`; `QueueEmptyError`, `QueueFullError` |
| `dstextbook.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder`, `folder_size`; `ThreadedNode`, `find_thread_successor`, `thread_inorder` |
| `dstextbook.bst` | `BSTNode`, `BinarySearchTree`, `search_with_count`, `DuplicateKeyError` |
| `dstextbook.avl` | `AVLTree`, rotations `ll_rotate`, `rr_rotate`, `lr_rotate`, `rl_rotate`, `get_height`, `get_bf`, `rebalance` |
| `dstextbook.heap` | `MaxHeap` (bounded, default 99 items); `HeapEmptyError`, `HeapFullError` |
| `dstextbook.graph` | `AdjacencyMatrixGraph`, `AdjacencyListGraph` with `dfs` and `bfs`, `vertex_label`, `GraphError` |
| `dstextbook.shortest_path` | `dijkstra`, `dijkstra_steps` (`DijkstraStep`), `floyd`, `floyd_steps`, `format_matrix`, a sample `WEIGHT` matrix with `INF = 10000` |
| `dstextbook.sorting` | `interval_sort`, `shell_sort(_steps)`, `merge_sort(_steps)`, `radix_sort(_steps)`, `tree_sort` |

Errors are raised as exceptions: an empty stack, queue or heap raises its
`...EmptyError`, a full one its `...FullError`; duplicate keys in a search
tree raise `DuplicateKeyError`; deleting a missing key from a
`BinarySearchTree` raises `KeyError`; unknown vertices raise `GraphError`.

Some behaviour is kept exactly as the algorithms define it:

- `fibo` uses the seeds `f(0) = 0`, `f(-1) = 2` and `f(n) = 1` for `n < -1`.
- `hanoi_moves` keeps the same pegs in both recursive steps, so every move
  goes from `source` to `target`.
- `radix_sort` makes two decimal passes by default; pass `digits=None` to
  use as many passes as the largest value needs.
- `tree_sort` keeps repeated values only once.

## Examples

```python
from dstextbook.linked_list import LinkedList

lst = LinkedList()
for day in ("월", "수", "일"):
    lst.insert_last(day)
node = lst.search("수")
lst.insert_middle(node, "금")
lst.reverse()
print(lst)            # L = (일, 금, 수, 월)
```

```python
from dstextbook.postfix import eval_postfix
from dstextbook.brackets import test_pair

eval_postfix("35*62/-")                          # 12
test_pair("{(A+B)-3}*5+[{cos(x+y)+7}-1]*4")      # True
```

```python
from dstextbook.heap import MaxHeap

heap = MaxHeap([10, 45, 19, 11, 96])
[heap.delete() for _ in range(len(heap))]        # [96, 45, 19, 11, 10]
```

```python
from dstextbook.shortest_path import dijkstra, floyd, format_matrix

dijkstra()                   # distances from vertex 0 in the sample WEIGHT matrix
print(format_matrix(floyd()))
```

```python
from dstextbook.sorting import merge_sort, radix_sort, shell_sort_steps

merge_sort([69, 10, 30, 2, 16, 8, 31, 22])
radix_sort([69, 10, 30, 2, 16, 8, 31, 22])
shell_sort_steps([69, 10, 30, 2, 16, 8, 31, 22])  # [(interval, state), ...]
```

## What it does not do

The package is a library only. It has no command-line program and no
interactive menu or prompt; everything is used by calling it from Python
code. Selection, bubble, quick and insertion sorts are not included in
`dstextbook.sorting`.

## Running the tests

```
pip install -e ".[test]"
pytest
```