import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", ["é", "٣", "_", "@", " "])
def test_non_ascii_letters_and_digits_rejected(c):
    assert not is_alnum(c)


def test_predicates_accept_code_points():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_digit(ord("a"))


def test_ascii_boundaries():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_boundaries():
    assert not is_print(31)
    assert is_print(32)
    assert is_print(126)
    assert not is_print(127)


def test_printable_count_matches_range():
    printable = [code for code in range(256) if is_print(code)]
    assert printable == list(range(32, 127))


@pytest.mark.parametrize("c", list("\t\n\v\f\r "))
def test_space_characters(c):
    assert is_space(c)


@pytest.mark.parametrize("c", ["\x1c", "\x85", "\u00a0", "a"])
def test_other_characters_are_not_space(c):
    assert not is_space(c)


def test_case_conversion_over_alphabet():
    assert "".join(to_lower(c) for c in string.ascii_uppercase) == string.ascii_lowercase
    assert "".join(to_upper(c) for c in string.ascii_lowercase) == string.ascii_uppercase


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others_unchanged(c):
    assert to_lower(c) == c
    assert to_upper(c) == c


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_lower(ord("5")) == ord("5")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)
    with pytest.raises(TypeError):
        to_lower(True)