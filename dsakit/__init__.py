"""Classic algorithms and small data structures: sorting, searching, graphs,
trees, strings, expressions, number puzzles, a ring-buffer queue and a
resizing stack."""

__version__ = "0.1.0"