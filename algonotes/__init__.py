"""Classic algorithms and data structures for study and experimentation."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "bst",
    "dynamic_array",
    "linked_lists",
    "numeric",
    "primes",
    "problems",
    "recursion",
    "searching",
    "text",
    "trees",
]