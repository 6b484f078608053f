import pytest

from bitview.errors import BitFormatError, FormatKind
from bitview.widths import Width


@pytest.mark.parametrize(
    "text,width,expected",
    [
        ("0", Width.UINT8, "00000000"),
        ("101", Width.UINT8, "00000101"),
        ("1000", Width.UINT8, "00001000"),
        ("11000", Width.INT8, "00011000"),
        ("00011000", Width.INT8, "00011000"),
        ("0xA", 16, "0000000000001010"),
        ("  0x FF ", Width.UINT32, "0" * 24 + "1" * 8),
        ("1", Width.INT64, "0" * 63 + "1"),
    ],
)
def test_zero_extend(codec, text, width, expected):
    assert codec.zero_extend(text, width) == expected

def test_zero_extend_never_truncates(codec):
    got = codec.zero_extend("0xAFF 0000 0011", Width.INT32)
    assert got == "10101111111100000000000000000000000000010001"

def test_zero_extend_propagates_validation_errors(codec):
    with pytest.raises(BitFormatError) as exc:
        codec.zero_extend("10 2", Width.UINT8)
    assert exc.value.kind is FormatKind.INVALID_BINARY_DIGIT

@pytest.mark.parametrize("width", [0, 7, 12, 128, "8", None])
def test_zero_extend_bad_width(codec, width):
    with pytest.raises(ValueError):
        codec.zero_extend("1", width)
