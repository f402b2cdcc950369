import pytest

from optim.parser import parse_long


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("123", 123),
        ("-123", -123),
        ("+5", 5),
        ("0x10", 16),
        ("0XfF", 255),
        ("-0x10", -16),
        ("017", 15),
        ("  9", 9),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


@pytest.mark.parametrize("text", ["", " ", "abc", "12 ", "0x", "08", "1.5", "--1", "1e3"])
def test_parse_long_invalid(text):
    with pytest.raises(ValueError):
        parse_long(text)
