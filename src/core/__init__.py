"""
Core domain models and mathematical primitives.

This module contains the numeric representation table and the uniform
sign-aware operations over it. It has no I/O and no shared mutable state.
"""
