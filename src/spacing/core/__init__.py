"""
Core value types and numeric primitives.

Nothing in this package performs I/O or depends on external systems.
"""
