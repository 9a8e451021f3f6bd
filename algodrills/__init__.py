"""Classic algorithm drills as plain Python functions."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "binary_search",
    "bits",
    "doubly_linked",
    "greedy",
    "linked_list",
    "list_algorithms",
    "sliding_window",
    "sorting",
    "substrings",
    "text",
]