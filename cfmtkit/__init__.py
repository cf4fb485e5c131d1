"""C-style string, memory, list and printf-style formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "strings",
    "memory",
    "transform",
    "lists",
    "output",
    "flags",
    "radix",
    "text_fields",
    "number_fields",
    "printf",
]