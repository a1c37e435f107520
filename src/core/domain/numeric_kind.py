"""
NumericKind — Таблица примитивных числовых представлений

Закрытый набор конкретных представлений, над которыми определён Signed facade:
- UNSIGNED: u8, u16, u32, u64, usize
- SIGNED_INTEGER: i8, i16, i32, i64, isize
- FLOAT: f32, f64

Каждое представление (kind) — immutable Pydantic модель. Значение хоста
(Python int/float или numpy scalar) однозначно отображается в kind через kind_of.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица закрыта: неизвестные типы отклоняются, а не приводятся
2. bool / complex / Decimal / float16 не являются числами ни одного семейства
3. Python int за пределами isize не является значением isize
"""

from enum import Enum
from typing import Any, Final

import numpy as np
from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SignedNumericError(Exception):
    """Базовое исключение для ошибок на границе Signed facade."""


class UnsupportedNumericTypeError(SignedNumericError, TypeError):
    """Значение не принадлежит ни одному поддерживаемому kind."""


class NumericKindMismatch(SignedNumericError, TypeError):
    """Операнды бинарной операции имеют разные kind."""


class NumericOverflowError(SignedNumericError, OverflowError):
    """
    Целочисленный результат вне диапазона kind.

    Возникает только при OverflowPolicy.RAISE, либо когда Python int
    не помещается в isize.
    """


# =============================================================================
# ENUMS
# =============================================================================


class NumericFamily(str, Enum):
    """Поведенческое семейство числового представления"""

    UNSIGNED = "unsigned"
    SIGNED_INTEGER = "signed_integer"
    FLOAT = "float"


# =============================================================================
# MODEL
# =============================================================================


class NumericKind(BaseModel):
    """
    Конкретное примитивное числовое представление.

    Attributes:
        name: Короткое имя (u8, i32, f64, ...)
        family: Семейство, определяющее правила знаковой арифметики
        bits: Ширина в битах
        dtype: Имя numpy dtype
        pointer_width: True для usize/isize
    """

    name: str = Field(..., min_length=2, description="Короткое имя представления")
    family: NumericFamily = Field(..., description="Поведенческое семейство")
    bits: int = Field(..., description="Ширина в битах")
    dtype: str = Field(..., description="Имя numpy dtype")
    pointer_width: bool = Field(default=False, description="Ширина указателя (usize/isize)")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Допустимы только аппаратные ширины"""
        if v not in (8, 16, 32, 64):
            raise ValueError(f"bits must be one of 8/16/32/64, got {v}")
        return v

    @property
    def is_integer(self) -> bool:
        return self.family is not NumericFamily.FLOAT

    @property
    def scalar_type(self) -> type:
        """numpy scalar type для данного kind"""
        return np.dtype(self.dtype).type

    @property
    def min_value(self) -> int:
        """
        Минимальное представимое значение (только для целых).

        Raises:
            TypeError: Для FLOAT семейства
        """
        if not self.is_integer:
            raise TypeError(f"{self.name} has no integer bounds")
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> int:
        """
        Максимальное представимое значение (только для целых).

        Raises:
            TypeError: Для FLOAT семейства
        """
        if not self.is_integer:
            raise TypeError(f"{self.name} has no integer bounds")
        return int(np.iinfo(self.dtype).max)

    def contains(self, value: int) -> bool:
        """Проверка, что целое значение помещается в диапазон kind"""
        return self.min_value <= value <= self.max_value


# =============================================================================
# ТАБЛИЦА ПРЕДСТАВЛЕНИЙ
# =============================================================================

U8: Final[NumericKind] = NumericKind(name="u8", family=NumericFamily.UNSIGNED, bits=8, dtype="uint8")
U16: Final[NumericKind] = NumericKind(name="u16", family=NumericFamily.UNSIGNED, bits=16, dtype="uint16")
U32: Final[NumericKind] = NumericKind(name="u32", family=NumericFamily.UNSIGNED, bits=32, dtype="uint32")
U64: Final[NumericKind] = NumericKind(name="u64", family=NumericFamily.UNSIGNED, bits=64, dtype="uint64")
USIZE: Final[NumericKind] = NumericKind(
    name="usize",
    family=NumericFamily.UNSIGNED,
    bits=np.dtype(np.uintp).itemsize * 8,
    dtype="uintp",
    pointer_width=True,
)

I8: Final[NumericKind] = NumericKind(name="i8", family=NumericFamily.SIGNED_INTEGER, bits=8, dtype="int8")
I16: Final[NumericKind] = NumericKind(name="i16", family=NumericFamily.SIGNED_INTEGER, bits=16, dtype="int16")
I32: Final[NumericKind] = NumericKind(name="i32", family=NumericFamily.SIGNED_INTEGER, bits=32, dtype="int32")
I64: Final[NumericKind] = NumericKind(name="i64", family=NumericFamily.SIGNED_INTEGER, bits=64, dtype="int64")
ISIZE: Final[NumericKind] = NumericKind(
    name="isize",
    family=NumericFamily.SIGNED_INTEGER,
    bits=np.dtype(np.intp).itemsize * 8,
    dtype="intp",
    pointer_width=True,
)

F32: Final[NumericKind] = NumericKind(name="f32", family=NumericFamily.FLOAT, bits=32, dtype="float32")
F64: Final[NumericKind] = NumericKind(name="f64", family=NumericFamily.FLOAT, bits=64, dtype="float64")

SUPPORTED_KINDS: Final[tuple[NumericKind, ...]] = (
    U8, U16, U32, U64, USIZE,
    I8, I16, I32, I64, ISIZE,
    F32, F64,
)

_KINDS_BY_NAME: Final[dict[str, NumericKind]] = {kind.name: kind for kind in SUPPORTED_KINDS}

# numpy scalars: (dtype.kind, itemsize) → NumericKind
# Фиксированные ширины имеют приоритет над usize/isize
_KINDS_BY_DTYPE: Final[dict[tuple[str, int], NumericKind]] = {}
for _kind in SUPPORTED_KINDS:
    _dt = np.dtype(_kind.dtype)
    _KINDS_BY_DTYPE.setdefault((_dt.kind, _dt.itemsize), _kind)
del _kind, _dt


# =============================================================================
# РАЗРЕШЕНИЕ KIND
# =============================================================================


def kind_by_name(name: str) -> NumericKind:
    """
    Поиск kind по имени из таблицы.

    Args:
        name: Имя представления (например, "i32")

    Returns:
        NumericKind

    Raises:
        UnsupportedNumericTypeError: Если имя неизвестно
    """
    try:
        return _KINDS_BY_NAME[name]
    except KeyError:
        raise UnsupportedNumericTypeError(f"Unknown numeric kind: {name!r}") from None


def kind_of(value: Any) -> NumericKind:
    """
    Определение kind для значения хоста.

    Правила:
    - numpy scalar → по dtype (kind + itemsize)
    - Python int → isize (значение обязано помещаться в диапазон)
    - Python float → f64
    - bool и всё остальное → UnsupportedNumericTypeError

    Args:
        value: Значение хоста

    Returns:
        NumericKind

    Raises:
        UnsupportedNumericTypeError: Если тип не поддерживается
        NumericOverflowError: Если Python int не помещается в isize

    Examples:
        >>> kind_of(np.int8(-1)).name
        'i8'
        >>> kind_of(1.5).name
        'f64'
        >>> kind_of(3).name
        'isize'
    """
    if isinstance(value, np.generic):
        dt = value.dtype
        kind = _KINDS_BY_DTYPE.get((dt.kind, dt.itemsize))
        if kind is None:
            raise UnsupportedNumericTypeError(f"Unsupported numpy scalar type: {dt.name}")
        return kind

    # bool — подкласс int, но не число ни одного семейства
    if isinstance(value, bool):
        raise UnsupportedNumericTypeError(f"bool is not a signed numeric value: {value!r}")

    if isinstance(value, int):
        if not ISIZE.contains(value):
            raise NumericOverflowError(
                f"Python int {value} is outside isize range "
                f"[{ISIZE.min_value}, {ISIZE.max_value}]"
            )
        return ISIZE

    if isinstance(value, float):
        return F64

    raise UnsupportedNumericTypeError(f"Unsupported numeric type: {type(value).__name__}")


def family_of(value: Any) -> NumericFamily:
    """Семейство значения хоста (см. kind_of)"""
    return kind_of(value).family
