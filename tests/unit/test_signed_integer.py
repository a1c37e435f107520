"""
Тесты для целых семейств Signed facade (UNSIGNED, SIGNED_INTEGER)

Проверяет:
1. abs / abs_sub / signum / is_positive / is_negative
2. Сохранение типа хоста (numpy scalar остаётся своим dtype)
3. Переполнение abs(MIN) и abs_sub по OverflowPolicy
4. Свойства signum: значение в {-1, 0, 1}, x * signum(x) >= 0
"""

import logging

import numpy as np
import pytest

from src.core.domain import (
    I8,
    I16,
    I32,
    I64,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    NumericOverflowError,
)
from src.core.math import (
    OverflowPolicy,
    SignedConfig,
    SignedIntegerSigned,
    UnsignedSigned,
    abs_,
    abs_sub,
    is_negative,
    is_positive,
    signed_for,
    signum,
)

SIGNED_KINDS = [I8, I16, I32, I64]
UNSIGNED_KINDS = [U8, U16, U32, U64]
RAISE_CONFIG = SignedConfig(overflow=OverflowPolicy.RAISE)


# =============================================================================
# SIGNED_INTEGER
# =============================================================================


class TestSignedIntegerAbs:
    """Тесты для abs (SIGNED_INTEGER)"""

    def test_basic(self) -> None:
        assert abs_(-1) == 1
        assert abs_(1) == 1
        assert abs_(0) == 0

    @pytest.mark.parametrize("kind", SIGNED_KINDS)
    def test_preserves_numpy_type(self, kind) -> None:
        """Результат в том же dtype"""
        t = kind.scalar_type
        result = abs_(t(-5))
        assert type(result) is t
        assert result == 5

    def test_python_int_stays_int(self) -> None:
        result = abs_(-42)
        assert type(result) is int
        assert result == 42

    @pytest.mark.parametrize("kind", SIGNED_KINDS)
    def test_min_wraps_by_default(self, kind) -> None:
        """abs(MIN) == MIN при WRAP (two's complement)"""
        t = kind.scalar_type
        result = abs_(t(kind.min_value))
        assert type(result) is t
        assert result == kind.min_value

    def test_min_wrap_is_logged(self, caplog) -> None:
        """Заворачивание пишется в DEBUG лог"""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.signed"):
            abs_(np.int8(-128))
        assert "abs overflow for i8 wrapped" in caplog.text

    @pytest.mark.parametrize("kind", SIGNED_KINDS)
    def test_min_raises_with_raise_policy(self, kind) -> None:
        t = kind.scalar_type
        with pytest.raises(NumericOverflowError, match=f"abs overflow for {kind.name}"):
            abs_(t(kind.min_value), RAISE_CONFIG)

    def test_min_plus_one_is_fine(self) -> None:
        """MIN + 1 представим по модулю"""
        assert abs_(np.int8(-127), RAISE_CONFIG) == 127

    def test_python_int_isize_min(self) -> None:
        """Python int на границе isize ведёт себя как isize"""
        assert abs_(ISIZE.min_value) == ISIZE.min_value
        with pytest.raises(NumericOverflowError):
            abs_(ISIZE.min_value, RAISE_CONFIG)


class TestSignedIntegerAbsSub:
    """Тесты для abs_sub (SIGNED_INTEGER)"""

    def test_basic(self) -> None:
        assert abs_sub(2, 1) == 1
        assert abs_sub(1, 2) == 0
        assert abs_sub(5, 5) == 0
        assert abs_sub(-1, -3) == 2

    @pytest.mark.parametrize("x", [-7, -1, 0, 1, 3, 100])
    @pytest.mark.parametrize("y", [-8, -1, 0, 2, 100])
    def test_saturates_at_zero(self, x, y) -> None:
        """abs_sub(x, y) == 0 iff x <= y, иначе x - y"""
        result = abs_sub(x, y)
        if x <= y:
            assert result == 0
        else:
            assert result == x - y

    def test_numpy_type_preserved(self) -> None:
        result = abs_sub(np.int16(10), np.int16(-5))
        assert type(result) is np.int16
        assert result == 15

    def test_zero_result_type(self) -> None:
        result = abs_sub(np.int32(1), np.int32(9))
        assert type(result) is np.int32
        assert result == 0

    def test_overflow_wraps_by_default(self) -> None:
        """127 - (-128) = 255 не помещается в i8 → заворачивается в -1"""
        result = abs_sub(np.int8(127), np.int8(-128))
        assert type(result) is np.int8
        assert result == -1

    def test_overflow_raises_with_raise_policy(self) -> None:
        with pytest.raises(NumericOverflowError, match="abs_sub overflow for i8"):
            abs_sub(np.int8(127), np.int8(-128), RAISE_CONFIG)


class TestSignedIntegerSignum:
    """Тесты для signum (SIGNED_INTEGER)"""

    def test_basic(self) -> None:
        assert signum(0) == 0
        assert signum(-1) == -1
        assert signum(1) == 1
        assert signum(-1000) == -1
        assert signum(1000) == 1

    @pytest.mark.parametrize("kind", SIGNED_KINDS)
    @pytest.mark.parametrize("value_of", [lambda k: k.min_value, lambda k: -1, lambda k: 0, lambda k: 1, lambda k: k.max_value])
    def test_signum_properties(self, kind, value_of) -> None:
        """signum ∈ {-1, 0, 1} и x * signum(x) >= 0"""
        t = kind.scalar_type
        x = t(value_of(kind))
        s = signum(x)
        assert type(s) is t
        assert int(s) in (-1, 0, 1)
        # произведение в Python int: MIN * -1 не помещается в dtype
        assert int(x) * int(s) >= 0


class TestSignedIntegerPredicates:
    """Тесты для is_positive / is_negative (SIGNED_INTEGER)"""

    def test_basic(self) -> None:
        assert is_positive(1) is True
        assert is_positive(-1) is False
        assert is_negative(1) is False
        assert is_negative(-1) is True

    def test_zero_is_neither(self) -> None:
        """У целых нет знакового нуля"""
        assert is_positive(0) is False
        assert is_negative(0) is False
        assert is_positive(np.int64(0)) is False
        assert is_negative(np.int64(0)) is False

    def test_returns_python_bool(self) -> None:
        assert type(is_positive(np.int8(3))) is bool
        assert type(is_negative(np.int8(-3))) is bool

    @pytest.mark.parametrize("kind", SIGNED_KINDS)
    def test_bounds(self, kind) -> None:
        t = kind.scalar_type
        assert is_negative(t(kind.min_value))
        assert is_positive(t(kind.max_value))


# =============================================================================
# UNSIGNED
# =============================================================================


class TestUnsigned:
    """Тесты для UNSIGNED семейства"""

    @pytest.mark.parametrize("kind", UNSIGNED_KINDS)
    def test_abs_is_identity(self, kind) -> None:
        t = kind.scalar_type
        for value in (0, 1, kind.max_value):
            result = abs_(t(value))
            assert type(result) is t
            assert result == value

    @pytest.mark.parametrize("kind", UNSIGNED_KINDS)
    def test_signum_is_binary(self, kind) -> None:
        """signum: 1 если x > 0, иначе 0"""
        t = kind.scalar_type
        assert signum(t(0)) == 0
        assert signum(t(1)) == 1
        assert signum(t(kind.max_value)) == 1
        assert type(signum(t(7))) is t

    def test_abs_sub_saturates(self) -> None:
        """Беззнаковая разность не заворачивается ниже нуля"""
        assert abs_sub(np.uint8(3), np.uint8(10)) == 0
        assert abs_sub(np.uint8(10), np.uint8(3)) == 7
        assert abs_sub(np.uint64(U64.max_value), np.uint64(0)) == U64.max_value
        assert type(abs_sub(np.uint16(1), np.uint16(2))) is np.uint16

    def test_abs_sub_never_overflows(self) -> None:
        """max - 0 всегда представим, RAISE не срабатывает"""
        result = abs_sub(np.uint8(255), np.uint8(0), RAISE_CONFIG)
        assert result == 255

    def test_predicates(self) -> None:
        assert is_positive(np.uint32(1)) is True
        assert is_positive(np.uint32(0)) is False
        assert is_negative(np.uint32(0)) is False
        assert is_negative(np.uint32(U32.max_value)) is False

    def test_rule_table_type(self) -> None:
        assert isinstance(signed_for(U8), UnsignedSigned)
        assert isinstance(signed_for(I8), SignedIntegerSigned)
        assert isinstance(signed_for(U16), UnsignedSigned)
