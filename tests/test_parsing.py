import pytest

from diophant_pkg import config
from diophant_pkg.types import General
from diophant_pkg.types import ParseError
from diophant_pkg.utils.parsing import parse_equation


@pytest.mark.parametrize(
    "text,expected",
    [
        ("x^2 + 2*x*y + 3*y^2 + 3*x + 5*y = 0", General(1, 2, 3, 3, 5, 0)),
        ("x^2 + 2xy + 3y^2 + 3x + 5y = 0", General(1, 2, 3, 3, 5, 0)),
        ("2x + 4y + 5 = 0", General(0, 0, 0, 2, 4, 5)),
        ("x*y = 6", General(0, 1, 0, 0, 0, -6)),
        ("(x - y)^2 = x", General(1, -2, 1, -1, 0, 0)),
        ("x**2 - y**2", General(1, 0, -1, 0, 0, 0)),
        ("x = x", General(0, 0, 0, 0, 0, 0)),
        ("(x + 1)*(y - 2) = 3", General(0, 1, 0, -2, 1, -5)),
        ("x/2 + x/2 = y", General(0, 0, 0, 1, -1, 0)),
    ],
)
def test_parse_equation(text, expected):
    assert parse_equation(text) == expected


@pytest.mark.parametrize(
    "text,code",
    [
        ("x^3 = y", "NOT_QUADRATIC"),
        ("x^2*y^2 = 1", "NOT_QUADRATIC"),
        ("1/x = y", "NOT_QUADRATIC"),
        ("x + z = 1", "TOO_MANY_VARIABLES"),
        ("x/2 + y = 1", "NON_INTEGER_COEFFICIENT"),
        ("x^2 = 2.5", "NON_INTEGER_COEFFICIENT"),
        ("x = y = 1", "INVALID_FORMAT"),
        ("= 3", "INVALID_FORMAT"),
        ("x^2 + y^2 =", "INVALID_FORMAT"),
    ],
)
def test_parse_errors(text, code):
    with pytest.raises(ParseError) as exc_info:
        parse_equation(text)
    assert exc_info.value.code == code


def test_syntax_error():
    with pytest.raises(ParseError):
        parse_equation("x + * = 1")


def test_input_length_limit(monkeypatch):
    monkeypatch.setattr(config, "MAX_INPUT_LENGTH", 10)
    with pytest.raises(ParseError) as exc_info:
        parse_equation("x^2 + y^2 = 25")
    assert exc_info.value.code == "INPUT_TOO_LONG"
