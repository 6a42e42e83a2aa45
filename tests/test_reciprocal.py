import pytest

from rxrecip.reciprocal import reciprocal, reciprocal_fast

REFERENCE = [
    (3, 12297829382473034410),
    (13, 11351842506898185609),
    (33, 17887751829051686415),
    (65537, 18446462603027742720),
    (15000001, 10316166306300415204),
    (3845182035, 10302264209224146340),
    (0xFFFFFFFF, 9223372039002259456),
]


@pytest.mark.parametrize("divisor, expected", REFERENCE)
def test_reciprocal_reference_values(divisor, expected):
    assert reciprocal(divisor) == expected


@pytest.mark.parametrize("divisor, expected", REFERENCE)
def test_reciprocal_fast_reference_values(divisor, expected):
    assert reciprocal_fast(divisor) == expected


@pytest.mark.parametrize(
    "divisor", [3, 5, 7, 13, 1000, 65537, 0xFFFFFFFF, (1 << 64) - 1, 12345678901234567]
)
def test_result_is_highest_power_quotient(divisor):
    rcp = reciprocal(divisor)
    assert rcp < 1 << 64
    # Doubling the exponent once more would overflow 64 bits.
    assert rcp >= 1 << 63


def test_power_of_two_wraps_to_zero():
    assert reciprocal(1) == 0
    assert reciprocal(4) == 0
    assert reciprocal(1 << 63) == 0


def test_zero_divisor_raises():
    with pytest.raises(ValueError):
        reciprocal(0)
    with pytest.raises(ValueError):
        reciprocal_fast(0)


@pytest.mark.parametrize("divisor", [-1, 1 << 64])
def test_out_of_range_divisor_raises(divisor):
    with pytest.raises(ValueError):
        reciprocal(divisor)


@pytest.mark.parametrize("divisor", [3.0, "3", True])
def test_non_integer_divisor_raises(divisor):
    with pytest.raises(TypeError):
        reciprocal(divisor)