import pytest

from fmtkit.strsearch import atoi, itoa, strchr, strlen, strncmp, strnstr, strrchr


def test_strlen_counts_characters():
    assert strlen("Happy November") == len("Happy November")


def test_strlen_missing_and_empty_are_zero():
    assert strlen(None) == 0
    assert strlen("") == 0


@pytest.mark.parametrize("c", ["H", "p", "N", " ", "r"])
def test_strchr_finds_first_occurrence(c):
    s = "Happy November"
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_absent_is_none():
    assert strchr("Happy November", "z") is None


def test_strchr_terminator_is_length():
    assert strchr("abc", "") == 3
    assert strchr("abc", "\0") == 3


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("c", ["p", "e", "H", "r"])
def test_strrchr_finds_last_occurrence(c):
    s = "Happy November"
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_absent_and_terminator():
    assert strrchr("Happy November", "z") is None
    assert strrchr("Happy", "\0") == len("Happy")


def test_strnstr_empty_needle_is_start():
    assert strnstr("haystack", "", 0) == 0


def test_strnstr_finds_within_length():
    haystack = "Please copy this: Hi it is cold today"
    index = strnstr(haystack, "cold", len(haystack))
    assert haystack.startswith("cold", index)
    assert "cold" not in haystack[:index + len("cold") - 1]


def test_strnstr_respects_length_limit():
    haystack = "Please copy this"
    found = haystack.find("this")
    assert strnstr(haystack, "this", found + len("this")) == found
    assert strnstr(haystack, "this", found + len("this") - 1) is None


def test_strnstr_empty_haystack_or_short_length():
    assert strnstr("", "a", 5) is None
    assert strnstr("abc", "abc", 2) is None


def test_strnstr_length_beyond_haystack():
    assert strnstr("ab", "bc", 10) is None


def test_strncmp_equal_prefix_is_zero():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_negative_n_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_atoi_source_example():
    assert atoi("\t    -12356asd") == -12356


def test_atoi_whitespace_and_plus():
    assert atoi("\t\n\v\f\r +42") == 42


@pytest.mark.parametrize("text", ["abc", "- 5", "", "+-3"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 2147, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_positive():
    assert itoa(2147) == "2147"