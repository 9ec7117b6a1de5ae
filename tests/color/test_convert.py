import math

import pytest

from srgb_lut import (
    ColorSample,
    OutOfDomainError,
    delinearization_table,
    linearization_table,
    to_index,
    to_linear,
    to_linear_approx,
    to_srgb,
    to_srgb_approx,
)


def test_to_linear_concrete_example():
    sample = ColorSample(128 / 255, 64 / 255, 200 / 255, 255 / 255)
    lut = linearization_table()
    out = to_linear(sample)
    assert out == ColorSample(lut[128], lut[64], lut[200], 1.0)


def test_to_srgb_uses_delinearization_table():
    sample = ColorSample.from_bytes(13, 55, 134)
    lut = delinearization_table()
    out = to_srgb(sample)
    assert out.as_tuple() == (lut[13], lut[55], lut[134], 1.0)
    # red must go through the table like the other channels
    assert out.red != sample.red


@pytest.mark.parametrize("value", [0, 32, 64, 128, 192, 255])
def test_roundtrip_within_two_steps(value):
    sample = ColorSample.from_bytes(value, value, value)
    back = to_srgb(to_linear(sample))
    for got in back.as_tuple()[:3]:
        assert abs(got * 255 - value) <= 2


@pytest.mark.parametrize("convert", [to_linear, to_srgb, to_linear_approx, to_srgb_approx])
def test_alpha_passthrough(convert):
    alpha = 0.123456789
    out = convert(ColorSample(0.2, 0.4, 0.6, alpha))
    assert out.alpha is alpha


def test_alpha_not_validated():
    out = to_linear(ColorSample(0.0, 0.0, 0.0, 7.5))
    assert out.alpha == 7.5


def test_input_not_mutated():
    sample = ColorSample(0.25, 0.5, 0.75, 0.9)
    out = to_linear(sample)
    assert out is not sample
    assert sample == ColorSample(0.25, 0.5, 0.75, 0.9)


def test_index_rounds_half_up():
    assert to_index(0.0) == 0
    assert to_index(1.0) == 255
    assert to_index(0.5 / 255) == 1
    assert to_index(0.49 / 255) == 0
    assert to_index(127.5 / 255) == 128


@pytest.mark.parametrize("bad", [-0.01, 1.01, math.nan, math.inf])
def test_out_of_domain_rejected(bad):
    with pytest.raises(OutOfDomainError):
        to_index(bad)
    with pytest.raises(ValueError, match="green"):
        to_linear(ColorSample(0.5, bad, 0.5))


def test_approx_conversion_uses_gamma_ramp():
    out = to_linear_approx(ColorSample.from_bytes(0, 128, 255))
    assert out.red == 0.0
    assert out.green == round(255 * (128 / 255) ** 2.2) / 255
    assert out.blue == 1.0
    back = to_srgb_approx(out)
    assert abs(back.green * 255 - 128) <= 2
