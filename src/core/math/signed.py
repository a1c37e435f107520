"""
Signed — Единый знаковый интерфейс над примитивными числами

Один контракт (abs, abs_sub, signum, is_positive, is_negative) с таблицей
правил для каждого семейства:
- UNSIGNED: знак бинарный (ноль / положительное)
- SIGNED_INTEGER: полный порядок, нет -0, нет NaN/Inf
- FLOAT: IEEE-754 — знаковый ноль, NaN, бесконечности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые и тотальные на своём домене
2. NaN пропагирует через abs/abs_sub/signum, сравнения с NaN → False
3. Float signum никогда не возвращает 0.0: только ±1.0 или NaN
4. Знак float определяется знаковым битом, включая ±0.0
5. Результат имеет тот же тип хоста, что и вход (без конверсий между kind)
6. Целочисленное переполнение (abs(MIN), abs_sub) — по OverflowPolicy

ФОРМУЛЫ:
    abs_sub(x, y) = 0 if x <= y else x - y          (целые)
    abs_sub(x, y) = fdim(x, y)                      (float)
    is_positive(x) = x > 0.0 or 1.0 / x == +inf     (float)
    is_negative(x) = x < 0.0 or 1.0 / x == -inf     (float)
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Final

import numpy as np

from src.core.domain.numeric_kind import (
    NumericFamily,
    NumericKind,
    NumericKindMismatch,
    NumericOverflowError,
    kind_of,
)

_LOGGER = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при выходе целочисленного результата за диапазон kind"""

    WRAP = "wrap"  # two's complement, abs(MIN) == MIN
    RAISE = "raise"


@dataclass(frozen=True)
class SignedConfig:
    """Конфигурация Signed facade.

    По умолчанию целочисленное переполнение заворачивается (WRAP),
    как у аппаратной арифметики.
    """

    overflow: OverflowPolicy = OverflowPolicy.WRAP


DEFAULT_CONFIG: Final[SignedConfig] = SignedConfig()


# =============================================================================
# КОНТРАКТ
# =============================================================================


class Signed(ABC):
    """Знаковые операции, привязанные к одному kind.

    Реализуется один раз на семейство; экземпляр получается через
    signed_for(kind). Значения передаются в типе хоста этого kind.
    """

    family: NumericFamily

    def __init__(self, kind: NumericKind, config: SignedConfig | None = None):
        if kind.family is not self.family:
            raise ValueError(f"{type(self).__name__} cannot serve {kind.family.value} kind {kind.name}")
        self.kind = kind
        self.config = config or DEFAULT_CONFIG

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, overflow={self.config.overflow.value})"

    @abstractmethod
    def abs(self, x: Any) -> Any:
        """Абсолютное значение"""

    @abstractmethod
    def abs_sub(self, x: Any, other: Any) -> Any:
        """Положительная разность: x - other, но не меньше нуля"""

    @abstractmethod
    def signum(self, x: Any) -> Any:
        """Представитель класса знака"""

    @abstractmethod
    def is_positive(self, x: Any) -> bool:
        """Строго положительное (для float включая +0.0)"""

    @abstractmethod
    def is_negative(self, x: Any) -> bool:
        """Строго отрицательное (для float включая -0.0)"""


# =============================================================================
# ЦЕЛЫЕ СЕМЕЙСТВА
# =============================================================================


class _IntegerSigned(Signed):
    """Общие правила UNSIGNED и SIGNED_INTEGER."""

    def abs_sub(self, x: Any, other: Any) -> Any:
        if x <= other:
            return type(x)(0)
        return self._fit(type(x), int(x) - int(other), "abs_sub")

    def is_positive(self, x: Any) -> bool:
        return bool(x > 0)

    def _fit(self, result_type: type, value: int, op: str) -> Any:
        """
        Приведение точного целого результата к диапазону kind.

        Args:
            result_type: Тип хоста результата (int или numpy scalar type)
            value: Точный результат в Python int
            op: Имя операции (для сообщений)

        Returns:
            value, либо значение по модулю 2**bits при WRAP

        Raises:
            NumericOverflowError: Если результат вне диапазона и policy == RAISE
        """
        kind = self.kind
        if kind.contains(value):
            return result_type(value)

        if self.config.overflow is OverflowPolicy.RAISE:
            raise NumericOverflowError(
                f"{op} overflow for {kind.name}: {value} outside "
                f"[{kind.min_value}, {kind.max_value}]"
            )

        wrapped = (value - kind.min_value) % (1 << kind.bits) + kind.min_value
        _LOGGER.debug("%s overflow for %s wrapped: %d -> %d", op, kind.name, value, wrapped)
        return result_type(wrapped)


class UnsignedSigned(_IntegerSigned):
    """Правила UNSIGNED: значения >= 0, знак бинарный."""

    family = NumericFamily.UNSIGNED

    def abs(self, x: Any) -> Any:
        return x

    def signum(self, x: Any) -> Any:
        return type(x)(1 if x > 0 else 0)

    def is_negative(self, x: Any) -> bool:
        return False


class SignedIntegerSigned(_IntegerSigned):
    """Правила SIGNED_INTEGER.

    abs(MIN) не представим: при WRAP возвращается MIN, при RAISE —
    NumericOverflowError. Вызывающий код, которому нужна гарантия
    неотрицательности, проверяет MIN заранее.
    """

    family = NumericFamily.SIGNED_INTEGER

    def abs(self, x: Any) -> Any:
        if self.is_negative(x):
            return self._fit(type(x), -int(x), "abs")
        return x

    def signum(self, x: Any) -> Any:
        if x > 0:
            return type(x)(1)
        if x == 0:
            return type(x)(0)
        return type(x)(-1)

    def is_negative(self, x: Any) -> bool:
        return bool(x < 0)


# =============================================================================
# FLOAT СЕМЕЙСТВО
# =============================================================================


class FloatSigned(Signed):
    """Правила FLOAT (IEEE-754).

    Знаковый бит читается и меняется только библиотечными примитивами
    (fabs, copysign, деление на ноль), без условных веток по значению.
    """

    family = NumericFamily.FLOAT

    def abs(self, x: Any) -> Any:
        # fabs сбрасывает только знаковый бит, payload NaN сохраняется
        return type(x)(np.fabs(x))

    def abs_sub(self, x: Any, other: Any) -> Any:
        """fdim: x - other если x > other, иначе +0.0; NaN если любой операнд NaN"""
        if math.isnan(x) or math.isnan(other):
            # сумма возвращает NaN-операнд, сохраняя его payload
            return type(x)(x + other)
        if x > other:
            with np.errstate(over="ignore"):
                return type(x)(x - other)
        return type(x)(0.0)

    def signum(self, x: Any) -> Any:
        if math.isnan(x):
            return type(x)(math.nan)
        return type(x)(np.copysign(1.0, x))

    def is_positive(self, x: Any) -> bool:
        # 1/+0.0 == +inf, 1/-0.0 == -inf; обычное сравнение ±0.0 не различает
        with np.errstate(all="ignore"):
            return bool(x > 0.0 or np.divide(1.0, x) == np.inf)

    def is_negative(self, x: Any) -> bool:
        with np.errstate(all="ignore"):
            return bool(x < 0.0 or np.divide(1.0, x) == -np.inf)


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================

_SIGNED_BY_FAMILY: Final[dict[NumericFamily, type[Signed]]] = {
    NumericFamily.UNSIGNED: UnsignedSigned,
    NumericFamily.SIGNED_INTEGER: SignedIntegerSigned,
    NumericFamily.FLOAT: FloatSigned,
}


@lru_cache(maxsize=None)
def signed_for(kind: NumericKind, config: SignedConfig | None = None) -> Signed:
    """
    Таблица правил, привязанная к kind.

    Экземпляры immutable по использованию и кэшируются на (kind, config).

    Args:
        kind: Числовое представление
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Signed для семейства kind

    Examples:
        >>> from src.core.domain.numeric_kind import I32
        >>> int(signed_for(I32).signum(np.int32(-7)))
        -1
    """
    return _SIGNED_BY_FAMILY[kind.family](kind, config)


def _same_kind(x: Any, other: Any) -> NumericKind:
    kind = kind_of(x)
    other_kind = kind_of(other)
    if other_kind != kind:
        raise NumericKindMismatch(
            f"abs_sub operands must share a kind, got {kind.name} and {other_kind.name}"
        )
    return kind


def abs_(x: Any, config: SignedConfig | None = None) -> Any:
    """
    Абсолютное значение для любого поддерживаемого числа.

    Examples:
        >>> abs_(-1)
        1
        >>> abs_(-1.0)
        1.0
    """
    return signed_for(kind_of(x), config).abs(x)


def abs_sub(x: Any, other: Any, config: SignedConfig | None = None) -> Any:
    """
    Положительная разность двух чисел одного kind.

    Raises:
        NumericKindMismatch: Если x и other разных kind

    Examples:
        >>> abs_sub(2, 1)
        1
        >>> abs_sub(-1.0, -2.0)
        1.0
        >>> abs_sub(1, 2)
        0
    """
    return signed_for(_same_kind(x, other), config).abs_sub(x, other)


def signum(x: Any) -> Any:
    """
    Знак числа.

    Целые: -1 / 0 / 1 (unsigned: 0 / 1). Float: ±1.0 по знаковому биту, NaN → NaN.

    Examples:
        >>> signum(0)
        0
        >>> signum(-1)
        -1
        >>> signum(-0.0)
        -1.0
    """
    return signed_for(kind_of(x)).signum(x)


def is_positive(x: Any) -> bool:
    """
    Examples:
        >>> is_positive(1)
        True
        >>> is_positive(-1)
        False
        >>> is_positive(0.0)
        True
    """
    return signed_for(kind_of(x)).is_positive(x)


def is_negative(x: Any) -> bool:
    """
    Examples:
        >>> is_negative(-0.0)
        True
        >>> is_negative(float("nan"))
        False
    """
    return signed_for(kind_of(x)).is_negative(x)
