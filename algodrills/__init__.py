"""Classic algorithm exercises: patterns, arrays, searching, strings, maths and recursion."""

__version__ = "0.1.0"