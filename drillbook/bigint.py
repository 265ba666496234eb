"""Arbitrary-precision signed integers stored as base 10**9 limbs."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Sequence, Tuple, Union

__all__ = ["Integer", "isqrt", "power", "karatsuba"]

_STEP = 9
_BASE = 10**_STEP
_KARATSUBA_CUTOFF = 4
_NUMBER = re.compile(r"\s*([+-]?)(\d+)\s*")

_Limbs = Tuple[int, ...]
_ZERO: _Limbs = (0,)


def _trim(limbs: Sequence[int]) -> _Limbs:
    digits = list(limbs)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return tuple(digits) if digits else _ZERO


def _key(limbs: _Limbs) -> Tuple[int, _Limbs]:
    return len(limbs), tuple(reversed(limbs))


def _add_mag(a: _Limbs, b: _Limbs) -> _Limbs:
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, _BASE)
        result.append(digit)
    if carry:
        result.append(carry)
    return _trim(result)


def _sub_mag(a: _Limbs, b: _Limbs) -> _Limbs:
    """Return ``a - b`` for magnitudes with ``a >= b``."""
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        digit = x - y - borrow
        borrow = 1 if digit < 0 else 0
        result.append(digit + borrow * _BASE)
    return _trim(result)


def _mul_mag(a: _Limbs, b: _Limbs) -> _Limbs:
    result = [0] * (len(a) + len(b) + 1)
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, _BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, _BASE)
            k += 1
    return _trim(result)


def _shift(limbs: _Limbs, count: int) -> _Limbs:
    return limbs if limbs == _ZERO else (0,) * count + limbs


def _divmod_mag(a: _Limbs, b: _Limbs) -> Tuple[_Limbs, _Limbs]:
    """Long division of magnitudes, choosing each quotient limb by binary search."""
    quotient = []
    current = _ZERO
    divisor_key = _key(b)
    for limb in reversed(a):
        current = _trim((limb,) + current)
        current_key = _key(current)
        low, high, digit = 0, _BASE - 1, 0
        while low <= high:
            middle = (low + high) // 2
            if _key(_mul_mag(b, (middle,))) <= current_key:
                digit = middle
                low = middle + 1
            else:
                high = middle - 1
        quotient.append(digit)
        if digit:
            current = _sub_mag(current, _mul_mag(b, (digit,)))
    del divisor_key
    return _trim(list(reversed(quotient))), current


def _isqrt_mag(x: _Limbs) -> _Limbs:
    root = [0] * ((len(x) + 1) // 2)
    target = _key(x)
    for i in reversed(range(len(root))):
        low, high, digit = 0, _BASE - 1, 0
        while low <= high:
            middle = (low + high) // 2
            root[i] = middle
            candidate = _trim(root)
            if _key(_mul_mag(candidate, candidate)) <= target:
                digit = middle
                low = middle + 1
            else:
                high = middle - 1
        root[i] = digit
    return _trim(root)


def _karatsuba_mag(a: _Limbs, b: _Limbs) -> _Limbs:
    size = max(len(a), len(b))
    if size <= _KARATSUBA_CUTOFF:
        return _mul_mag(a, b)
    step = size // 2
    a_low, a_high = _trim(a[:step]), _trim(a[step:])
    b_low, b_high = _trim(b[:step]), _trim(b[step:])
    high = _karatsuba_mag(a_high, b_high)
    low = _karatsuba_mag(a_low, b_low)
    cross = _karatsuba_mag(_add_mag(a_low, a_high), _add_mag(b_low, b_high))
    middle = _sub_mag(_sub_mag(cross, high), low)
    return _add_mag(_add_mag(_shift(high, 2 * step), _shift(middle, step)), low)


def _parse(text: str) -> Tuple[bool, _Limbs]:
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    limbs = [int(digits[max(0, end - _STEP):end]) for end in range(len(digits), 0, -_STEP)]
    return sign == "-", _trim(limbs)


def _from_int(value: int) -> Tuple[bool, _Limbs]:
    negative = value < 0
    value = abs(value)
    limbs = []
    while True:
        value, digit = divmod(value, _BASE)
        limbs.append(digit)
        if not value:
            break
    return negative, _trim(limbs)


_Operand = Union["Integer", int, str]


class Integer:
    """An immutable signed integer of any size.

    Operands of arithmetic and comparison may also be ``int`` or decimal
    strings such as ``"+123"``. Division truncates toward zero and the
    remainder takes the sign of the dividend.
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: _Operand = 0) -> None:
        if isinstance(value, Integer):
            negative, limbs = value._negative, value._limbs
        elif isinstance(value, int):
            negative, limbs = _from_int(value)
        elif isinstance(value, str):
            negative, limbs = _parse(value)
        else:
            raise TypeError(f"cannot build Integer from {type(value).__name__}")
        self._negative = negative and limbs != _ZERO
        self._limbs = limbs

    @classmethod
    def _make(cls, negative: bool, limbs: _Limbs) -> "Integer":
        result = cls.__new__(cls)
        result._limbs = _trim(limbs)
        result._negative = negative and result._limbs != _ZERO
        return result

    @staticmethod
    def _coerce(value: object) -> Union["Integer", None]:
        if isinstance(value, Integer):
            return value
        if isinstance(value, (int, str)):
            return Integer(value)
        return None

    def __add__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._negative == rhs._negative:
            return Integer._make(self._negative, _add_mag(self._limbs, rhs._limbs))
        if _key(self._limbs) < _key(rhs._limbs):
            return Integer._make(rhs._negative, _sub_mag(rhs._limbs, self._limbs))
        return Integer._make(self._negative, _sub_mag(self._limbs, rhs._limbs))

    def __radd__(self, other: object) -> "Integer":
        return self.__add__(other)

    def __neg__(self) -> "Integer":
        return Integer._make(not self._negative, self._limbs)

    def __sub__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> "Integer":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Integer._make(
            self._negative != rhs._negative, _mul_mag(self._limbs, rhs._limbs)
        )

    def __rmul__(self, other: object) -> "Integer":
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> "Integer":
        """Quotient truncated toward zero."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._limbs == _ZERO:
            raise ZeroDivisionError("integer division by zero")
        quotient, _ = _divmod_mag(self._limbs, rhs._limbs)
        return Integer._make(self._negative != rhs._negative, quotient)

    def __mod__(self, other: object) -> "Integer":
        """Remainder of truncated division; it has the sign of the dividend."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self - (self // rhs) * rhs

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __hash__(self) -> int:
        return hash((self._negative, self._limbs))

    def _order(self) -> Tuple[int, Tuple[int, _Limbs]]:
        key = _key(self._limbs)
        if self._negative:
            return -1, (-key[0], tuple(-digit for digit in key[1]))
        return 1, key

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order() < rhs._order()

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order() <= rhs._order()

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order() > rhs._order()

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order() >= rhs._order()

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * _BASE + limb
        return -value if self._negative else value

    def __str__(self) -> str:
        top, *rest = reversed(self._limbs)
        body = str(top) + "".join(f"{limb:0{_STEP}d}" for limb in rest)
        return f"-{body}" if self._negative else body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __abs__(self) -> "Integer":
        return self.abs()

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of the value."""
        if self._limbs == _ZERO:
            return 0
        return -1 if self._negative else 1

    def abs(self) -> "Integer":
        """Return the absolute value."""
        return Integer._make(False, self._limbs)


def isqrt(x: _Operand) -> Integer:
    """Return the integer square root (floor) of a non-negative value."""
    value = Integer(x)
    if value.sign() < 0:
        raise ValueError("square root of a negative number")
    return Integer._make(False, _isqrt_mag(value._limbs))


def power(x: _Operand, n: int) -> Integer:
    """Return ``x`` raised to the non-negative integer power ``n``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    base = Integer(x)
    result = Integer(1)
    while n > 0:
        if n & 1:
            result = result * base
        base = base * base
        n >>= 1
    return result


def karatsuba(x: _Operand, y: _Operand) -> Integer:
    """Multiply two integers with the Karatsuba algorithm."""
    lhs, rhs = Integer(x), Integer(y)
    return Integer._make(
        lhs._negative != rhs._negative, _karatsuba_mag(lhs._limbs, rhs._limbs)
    )