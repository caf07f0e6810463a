import pytest

from pluscodes import get_alphabet, is_full, is_short, is_valid
from testing import read_csv_cases

validity_cases = read_csv_cases("validity")


@pytest.mark.parametrize("code, valid, short, full", validity_cases)
def test_validity(code, valid, short, full):
    assert is_valid(code) == (valid == "true")
    assert is_short(code) == (short == "true")
    assert is_full(code) == (full == "true")


@pytest.mark.parametrize("code, valid, short, full", validity_cases)
def test_valid_codes_are_never_short_and_full(code, valid, short, full):
    if is_valid(code):
        assert not (is_short(code) and is_full(code))
    else:
        assert not is_short(code)
        assert not is_full(code)


def test_empty_and_non_string_codes():
    assert is_valid("") is False
    assert is_valid(None) is False
    assert is_valid(12345678) is False
    assert is_short("") is False
    assert is_full("") is False


def test_separator_rules():
    assert is_valid("8FVC2222+22")
    # two separators
    assert not is_valid("8FVC+2222+22")
    assert not is_valid("8FVC2222++")
    # odd position
    assert not is_valid("8FV+2222")
    # after position 8
    assert not is_valid("8FVC22222+2")


def test_padding_rules():
    assert is_valid("8FVC2222+")
    assert is_valid("8FVC2200+")
    assert is_valid("8F000000+")
    # padding must be followed only by the separator
    assert not is_valid("8FVC2200+22")
    # padding can't start the code or have odd length
    assert not is_valid("00VC2222+")
    assert not is_valid("8FVC2220+")


def test_alphabet():
    assert get_alphabet() == "23456789CFGHJMPQRVWX"
    assert len(get_alphabet()) == 20


def test_characters_must_be_from_the_alphabet():
    assert is_valid("8fvc2222+22")
    # upper-cases to "FF", but isn't a code character itself
    assert not is_valid("8FVC2222+ﬀ")
    assert not is_valid("8FVC2222+2A")
    assert not is_valid("8FVC2222+ 2")


def test_short_and_full_examples():
    assert is_short("8FVC+")
    assert not is_full("8FVC+")
    assert is_full("7FG49Q00+")
    assert not is_short("7FG49Q00+")
