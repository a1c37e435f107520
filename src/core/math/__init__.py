"""
Core math modules

Знаковые операции над примитивными числовыми представлениями.
"""

# Signed facade
from src.core.math.signed import (
    # Config
    DEFAULT_CONFIG,
    OverflowPolicy,
    SignedConfig,
    # Rule tables
    FloatSigned,
    Signed,
    SignedIntegerSigned,
    UnsignedSigned,
    signed_for,
    # Operations
    abs_,
    abs_sub,
    is_negative,
    is_positive,
    signum,
)

__all__ = [
    # Signed — Config
    "DEFAULT_CONFIG",
    "OverflowPolicy",
    "SignedConfig",
    # Signed — Rule tables
    "FloatSigned",
    "Signed",
    "SignedIntegerSigned",
    "UnsignedSigned",
    "signed_for",
    # Signed — Operations
    "abs_",
    "abs_sub",
    "is_negative",
    "is_positive",
    "signum",
]
