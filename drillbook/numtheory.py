"""Greatest common divisor and least common multiple by Euclid's algorithm."""

__all__ = [
    "remainder",
    "gcd_iterative",
    "gcd_recursive",
    "lcm_iterative",
    "lcm_recursive",
]


def remainder(a: int, b: int) -> int:
    """Return the non-negative remainder of ``a`` divided by ``b``.

    The result always lies in ``[0, abs(b))``, whatever the signs of the
    operands. Raises ``ZeroDivisionError`` when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("remainder by zero")
    return a % abs(b)


def gcd_iterative(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` using a loop."""
    if b == 0:
        return abs(a)
    r = remainder(a, b)
    while r:
        a, b = b, r
        r = remainder(a, b)
    return abs(b)


def gcd_recursive(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` using recursion."""
    if b == 0:
        return abs(a)
    r = remainder(a, b)
    return gcd_recursive(b, r) if r else abs(b)


def lcm_iterative(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b`` (0 if either is 0)."""
    if a == 0 or b == 0:
        return 0
    a_abs, b_abs = abs(a), abs(b)
    return (a_abs // gcd_iterative(a_abs, b_abs)) * b_abs


def lcm_recursive(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b`` (0 if either is 0)."""
    if a == 0 or b == 0:
        return 0
    a_abs, b_abs = abs(a), abs(b)
    return (a_abs // gcd_recursive(a_abs, b_abs)) * b_abs