"""
Core value types and mathematical primitives.

This module contains the exact rational arithmetic building blocks, which
depend only on Python's arbitrary-precision integers.
"""
