import numpy as np
import pytest

from pmekit.string_utils import format_number, stringify


def test_pinned_real_format():
    assert format_number(1.5, 8, 3) == "   1.500"


def test_pinned_complex_format():
    assert format_number(complex(1.0, -2.0), 6, 2) == "(  1.00,  -2.00)"


@pytest.mark.parametrize("value", [0.0, 3.25, -12.5, 1234.0625])
def test_real_format_width_and_value(value):
    text = format_number(value, 20, 4)
    assert len(text) == 20
    assert float(text) == pytest.approx(value)


def test_numpy_scalar_is_real():
    text = format_number(np.float32(2.5), 10, 2)
    assert float(text) == pytest.approx(2.5)
    assert not text.strip().startswith("(")


def test_complex_round_trip():
    text = format_number(np.complex128(3.5 + 4.25j), 10, 3)
    assert text.startswith("(") and text.endswith(")")
    real, imag = text[1:-1].split(",")
    assert float(real) == pytest.approx(3.5)
    assert float(imag) == pytest.approx(4.25)


def test_stringify_rows_round_trip():
    data = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    text = stringify(data, 3)
    lines = text.splitlines()
    assert len(lines) == 2
    parsed = [[float(tok) for tok in line.split()] for line in lines]
    assert parsed == [data[:3], data[3:]]
    assert text.endswith("\n")


def test_stringify_partial_row_ends_with_separator():
    text = stringify([1.0, 2.0, 3.0], 2, width=6, precision=1)
    assert text.endswith("  ")
    assert text.count("\n") == 1


def test_stringify_invalid_row_dim():
    with pytest.raises(ValueError):
        stringify([1.0], 0)