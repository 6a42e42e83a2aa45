"""Fixed-point 64-bit reciprocals of integer divisors, in the reciprocal module."""

__version__ = "1.0.0"
__all__ = ["reciprocal"]