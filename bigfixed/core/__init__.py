"""
Core fixed-point type, numeric primitives, and serialisation contracts.

This module contains the foundational building blocks that are independent
of any caller (formatting front-ends, demonstration algorithms, etc.).
"""
