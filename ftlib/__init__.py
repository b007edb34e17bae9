"""Character, string, byte-buffer, linked-list, output, formatting and line-reading utilities."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "convert",
    "strings",
    "transform",
    "memory",
    "linked_list",
    "output",
    "printf",
    "line_reader",
]