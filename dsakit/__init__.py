"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "strings",
    "sorting",
    "linked_list",
    "circular_list",
    "stacks",
    "array_queue",
    "graphs",
    "trees",
]