"""Classic algorithm routines on linked lists, trees, arrays, strings, numbers and grids."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "binary_tree",
    "combinatorics",
    "grids",
    "linked_list",
    "queue_stack",
    "sums",
    "text",
]