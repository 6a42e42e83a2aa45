"""Fixed-point reciprocals of 64-bit unsigned divisors."""

__all__ = ["reciprocal", "reciprocal_fast"]

_UINT64_MASK = (1 << 64) - 1


def _check_divisor(divisor: int) -> None:
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise TypeError(f"divisor must be an int, not {type(divisor).__name__}")
    if divisor == 0:
        raise ValueError("divisor must not be 0")
    if not 0 < divisor <= _UINT64_MASK:
        raise ValueError("divisor must fit in an unsigned 64-bit integer")


def reciprocal(divisor: int) -> int:
    """Return 2**x // divisor for the highest x such that the result is below 2**64.

    The divisor should not be a power of two.  For a power of two the true
    quotient equals 2**64 and the result wraps to 0 in 64-bit arithmetic.
    """
    _check_divisor(divisor)
    # Long division of 2**63 by the divisor, carried on for as many further
    # bits as the divisor has, gives this quotient.
    exponent = 63 + divisor.bit_length()
    return ((1 << exponent) // divisor) & _UINT64_MASK


def reciprocal_fast(divisor: int) -> int:
    """Same result as :func:`reciprocal`."""
    return reciprocal(divisor)