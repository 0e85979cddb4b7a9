"""Character, string, byte-buffer, number, byte-order, list, queue, stack and output helpers."""

__version__ = "0.1.0"
__all__ = [
    "bits",
    "chars",
    "containers",
    "linkedlist",
    "memory",
    "numeric",
    "output",
    "strings",
    "strtools",
]