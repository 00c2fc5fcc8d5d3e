import pytest

from coreopts.parser import Arity


def test_arity_values():
    assert Arity("none") is Arity.NONE
    assert Arity("optional_one") is Arity.OPTIONAL_ONE
    assert Arity("required_one") is Arity.REQUIRED_ONE
    assert Arity("repeated") is Arity.REPEATED


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("flag", Arity.NONE),
        ("optional", Arity.OPTIONAL_ONE),
        ("Required", Arity.REQUIRED_ONE),
        (" multi ", Arity.REPEATED),
    ],
)
def test_arity_aliases(alias, expected):
    assert Arity(alias) is expected


def test_invalid_arity():
    with pytest.raises(ValueError, match="Must be one of"):
        Arity("many")
    with pytest.raises(ValueError):
        Arity(2)


def test_takes_value():
    assert not Arity.NONE.takes_value
    assert all(arity.takes_value for arity in Arity.choices() if arity is not Arity.NONE)


def test_str():
    assert str(Arity.REPEATED) == "repeated"
