"""Classic array, string, matrix, linked-list, stack and queue algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "design_list",
    "linked_list",
    "matrix",
    "numeric",
    "queues",
    "searching",
    "sorting",
    "stacks",
    "strings",
]