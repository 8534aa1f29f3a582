"""String, byte-buffer, linked-list, printf-style formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "printf", "lists", "line_reader"]