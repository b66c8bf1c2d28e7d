"""Classic data structures and algorithms: arrays, matrices, sorting, string search,
text metrics, stacks, queues, hash tables, linked lists, trees and heaps."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "matrix",
    "sorting",
    "search",
    "text",
    "stacks",
    "queues",
    "hashing",
    "linked_lists",
    "avl",
    "trees",
    "heaps",
]