# algokit

Classic data structures and algorithms in plain Python, with no
third-party dependencies. Everything works on ordinary Python values: lists,
lists of rows for matrices, and strings.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `FixedArray`; `find_duplicates_brute_force`, `find_duplicates_sorted`, `max_subarray_sum`, `merge_arrays`, `linear_search`, `binary_search`, `left_rotate`, `right_rotate` |
| `algokit.matrix` | `main_diagonal`, `secondary_diagonal`, `transpose`, `is_symmetric`, `multiply`, `find`, `sum_elements`, `subtract_elements`, `add`, `subtract` |
| `algokit.sorting` | `bubble_sort`, `bucket_sort`, `counting_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `selection_sort` |
| `algokit.search` | `naive_search`, `prefix_function`, `kmp_search`, `kmr_search`, `build_transition_table`, `automaton_search`, `contains_char`, `contains_substring`, `contains_char_backwards`, `exists` |
| `algokit.text` | `char_frequency`, `edit_distance` (Levenshtein) |
| `algokit.stacks` | `ArrayStack` (bounded), `LinkedStack` |
| `algokit.queues` | `CircularQueue`, `BoundedDeque`, `LinkedQueue`, `PriorityQueue`, `TwoStackQueue` |
| `algokit.hashing` | `ChainingHashTable`, `OpenAddressingHashTable` (linear probing) |
| `algokit.linked_lists` | `ListNode`, `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`, `has_cycle` (Floyd) |
| `algokit.avl` | `AVLNode`, `AVLTree` |
| `algokit.trees` | `TreeNode`, `BinaryTree`, `BinarySearchTree`, `inorder`, `preorder`, `postorder` |
| `algokit.heaps` | `MaxHeap`, `MinHeap`, `heapify`, `build_heap` |

## Examples

```python
from algokit.sorting import merge_sort
from algokit.search import kmp_search
from algokit.text import edit_distance
from algokit.arrays import max_subarray_sum, right_rotate

merge_sort([38, 27, 43, 3, 9, 82, 10])             # [3, 9, 10, 27, 38, 43, 82]
kmp_search("AABAACAADAABAAABAA", "AABA")           # [0, 9, 13]
edit_distance("kitten", "sitting")                 # 3
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
right_rotate([1, 2, 3, 4, 5], 2)                   # [4, 5, 1, 2, 3]
```

Data structures:

```python
from algokit.heaps import MinHeap
from algokit.avl import AVLTree

heap = MinHeap(11)
for key in (3, 2, 15, 5, 4, 45):
    heap.insert(key)
heap.extract_min()   # 2
heap.peek()          # 3

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
tree.preorder()      # [30, 20, 10, 25, 40, 50]
```

## Behaviour worth knowing

- The sorting functions take any iterable and return a new list; the input is
  not changed. `bucket_sort` accepts integers in `[0, 100)` only, and
  `counting_sort` and `radix_sort` accept non-negative integers only; other
  values raise `ValueError`.
- `heapify` and `build_heap` rearrange a mutable sequence in place into a max
  heap.
- Search functions in `algokit.search` return the list of every start index.
  `kmp_search`, `build_transition_table` and `automaton_search` raise
  `ValueError` for an empty pattern.
- Bounded containers (`FixedArray`, `ArrayStack`, `CircularQueue`,
  `BoundedDeque`, `PriorityQueue`, `MaxHeap`, `MinHeap`) take a capacity and
  raise `OverflowError` when full. Reading or removing from an empty
  container, bounded or not, raises `IndexError`.
- `PriorityQueue.front()` returns the highest-priority element, while
  `dequeue()` removes and returns the lowest-priority one. Equal priorities
  keep insertion order.
- `ChainingHashTable.remove` drops every copy of a key;
  `OpenAddressingHashTable.remove` leaves a tombstone. Both return whether the
  key was found.
- `SinglyLinkedList` and `DoublyLinkedList` ignore deletes and
  `insert_after` calls for values they do not hold;
  `CircularLinkedList.delete` and `insert_after` raise `ValueError` instead.
- `BinaryTree`, `BinarySearchTree` and `AVLTree` ignore duplicate keys.

## What it does not do

algokit is a library only: it has no command-line program, and every
structure lives in memory without any persistence.