"""Integer base-2 logarithms of integers and of single-precision floats."""

from __future__ import annotations

import struct

__all__ = ["ilog2_int", "ilog2_float"]

_INT_MAX = 2**31 - 1


def ilog2_int(n: int) -> int:
    """Return ``floor(log2(n))`` of ``n`` read as a 32-bit unsigned value.

    Negative values wrap around as unsigned numbers; zero gives 0.
    """
    bits = n & 0xFFFFFFFF
    return max(bits.bit_length() - 1, 0)


def ilog2_float(x: float) -> int:
    """Return the binary exponent of ``x`` rounded to single precision.

    Infinity and NaN give ``2**31 - 1``; subnormal values are handled
    exactly; zero raises ``ValueError``. The sign of ``x`` is ignored.
    Values too large for single precision raise ``OverflowError``.
    """
    (bits,) = struct.unpack("<I", struct.pack("<f", x))
    exponent = (bits >> 23) & 0xFF
    if exponent == 0xFF:
        return _INT_MAX
    if exponent:
        return exponent - 127
    mantissa = bits & 0x7FFFFF
    if not mantissa:
        raise ValueError("logarithm of zero is undefined")
    return mantissa.bit_length() - 150