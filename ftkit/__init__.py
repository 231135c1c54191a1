"""Character, number, output, string, memory, linked-list, printf and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "output",
    "strings",
    "memory",
    "linked_list",
    "printf",
    "line_reader",
]