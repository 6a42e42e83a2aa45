# rxrecip

Fixed-point reciprocals of 64-bit unsigned divisors.

For a divisor `d`, `reciprocal(d)` returns `2**x // d` for the highest `x`
such that the result still fits in 64 bits. Multiplying by such a value and
shifting replaces an integer division by a constant divisor.

## Installation

```
pip install rxrecip
```

## Usage

```python
from rxrecip.reciprocal import reciprocal, reciprocal_fast

reciprocal(3)           # 12297829382473034410
reciprocal(65537)       # 18446462603027742720
reciprocal(0xFFFFFFFF)  # 9223372039002259456

reciprocal_fast(13)     # same result as reciprocal(13)
```

## Arguments and errors

The divisor must be an `int` (not a `bool`) in the range `1` to `2**64 - 1`.

- A divisor that is not an `int` raises `TypeError`.
- A divisor of `0` raises `ValueError`.
- A divisor below `0` or above `2**64 - 1` raises `ValueError`.

The divisor should not be a power of two. For a power of two (including `1`)
the true quotient is exactly `2**64`, and the result wraps to `0` as it would
in 64-bit arithmetic.

`reciprocal_fast` gives the same result as `reciprocal`, with the same checks.
It is there for code that calls the fast variant by name.

## Running the tests

```
pip install -e ".[test]"
pytest
```