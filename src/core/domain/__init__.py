"""
Domain models and value objects.

Contains the closed table of primitive numeric representations (NumericKind)
and the boundary exceptions of the signed facade.
"""

from src.core.domain.numeric_kind import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    ISIZE,
    SUPPORTED_KINDS,
    U8,
    U16,
    U32,
    U64,
    USIZE,
    NumericFamily,
    NumericKind,
    NumericKindMismatch,
    NumericOverflowError,
    SignedNumericError,
    UnsupportedNumericTypeError,
    family_of,
    kind_by_name,
    kind_of,
)

__all__ = [
    # Kind table
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISIZE",
    "F32",
    "F64",
    "SUPPORTED_KINDS",
    # Model
    "NumericFamily",
    "NumericKind",
    # Exceptions
    "SignedNumericError",
    "UnsupportedNumericTypeError",
    "NumericKindMismatch",
    "NumericOverflowError",
    # Resolution
    "kind_of",
    "kind_by_name",
    "family_of",
]
