"""
Core arithmetic primitives, tolerance comparisons and case models.

Pure building blocks with no external state or I/O beyond loading
the bundled contract schemas.
"""
