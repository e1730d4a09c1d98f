"""Symbolic scalars, vectors and error values with propagating arithmetic."""