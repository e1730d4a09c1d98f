"""Numeric and symbolic math helpers: matrices, regression, calculus, vectors."""

__version__ = "0.1.0"