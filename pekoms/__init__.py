"""Parser combinators for text and binary input, with JSON-like, s-expression and WAVE readers."""

__version__ = "0.1.0"