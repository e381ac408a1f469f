"""Classic algorithms: conversions, searching, sorting, arrays, trees, matrices, a DFA and more."""

__version__ = "0.1.0"