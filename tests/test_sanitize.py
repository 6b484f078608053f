import pytest

@pytest.mark.parametrize(
    "text,expected",
    [
        ("    100  ", "100"),
        (" 0xAF", "0xAF"),
        ("0xAF     ", "0xAF"),
        ("0x3D", "0x3D"),
        ("", ""),
        ("    ", ""),
        ("1", "1"),
        ("1  0", "1  0"),
    ],
)
def test_trim(sanitize, text, expected):
    assert sanitize.trim(text) == expected

def test_trim_only_touches_spaces(sanitize):
    assert sanitize.trim("\t101\n") == "\t101\n"
    assert sanitize.trim(" \t101 ") == "\t101"

@pytest.mark.parametrize(
    "text,expected",
    [
        ("  1  0 0 ", " 1 0 0 "),
        ("0xAF", "0xAF"),
        ("0x  AF  AF  ", "0x AF AF "),
        ("", ""),
    ],
)
def test_normalize(sanitize, text, expected):
    assert sanitize.normalize(text) == expected

@pytest.mark.parametrize(
    "text,is_hex,expected",
    [
        ("  1  0 0 ", False, "100"),
        ("0xAF", True, "AF"),
        ("0x  AF  AF ", True, "AFAF"),
        ("0x", True, ""),
    ],
)
def test_canonicalize(sanitize, text, is_hex, expected):
    assert sanitize.canonicalize(text, is_hex) == expected

@pytest.mark.parametrize("bad", ["AF", "0XAF", " 0xAF", "x0AF"])
def test_canonicalize_hex_requires_lowercase_prefix(sanitize, bad):
    with pytest.raises(ValueError) as exc:
        sanitize.canonicalize(bad, is_hex=True)
    assert exc.value.kind.name == "MISSING_RADIX_PREFIX"
    assert str(exc.value) == f"{bad} is not a valid hexadecimal value."
