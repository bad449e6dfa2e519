import pytest

from dining.chars import to_upper
from dining.text import (
    atoi,
    itoa,
    split,
    strchr,
    strcmp,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_source_example():
    assert atoi("420") == 420


@pytest.mark.parametrize("n", [0, 1, -1, 420, 2147483647, -2147483648, -987654])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("  +17 99") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("+-5") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split(",,,", ",") == []


def test_split_words_never_contain_separator():
    words = split("a:bb::ccc:", ":")
    assert all(":" not in w and w for w in words)
    assert ":".join(words) == "a:bb:ccc"


def test_split_accepts_integer_code():
    assert split("x y", ord(" ")) == split("x y", " ")


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a, b", ", ")


def test_strtrim_source_example():
    text = "ababaaaMy name is P4bbaaabbad"
    assert strtrim(text, "ab") == "My name is P4bbaaabbad"


def test_strtrim_everything_and_nothing():
    assert strtrim("abab", "ab") == ""
    assert strtrim("", "ab") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_slices_and_clamps():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_strnstr_finds_within_limit():
    haystack, needle = "foo bar baz", "bar"
    found = strnstr(haystack, needle, len(haystack))
    assert haystack[found:].startswith(needle)
    assert strnstr(haystack, needle, found + len(needle)) == found
    assert strnstr(haystack, needle, found + len(needle) - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None
    assert strnstr("", "a", 10) is None


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 0) == 0


def test_strncmp_end_counts_as_zero():
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strcmp():
    assert strcmp("same", "same") == 0
    assert strcmp("a", "b") < 0
    assert strcmp("b", "a") > 0
    assert strcmp(None, "a") == 1
    assert strcmp("a", None) == 1


def test_strchr_and_strrchr():
    text = "hello"
    assert strchr(text, "l") == text.index("l")
    assert strrchr(text, "l") == text.rindex("l")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_nul_search_finds_end():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strmapi_upper_and_indices():
    text = "abc xyz"
    assert strmapi(text, lambda i, c: to_upper(c)) == text.upper()
    seen = []
    strmapi(text, lambda i, c: seen.append(i) or c)
    assert seen == list(range(len(text)))


def test_strmapi_requires_func():
    with pytest.raises(TypeError):
        strmapi("abc", None)