import pytest

from pipex.text import (
    atoi,
    bounded_concat,
    bounded_copy,
    bounded_find,
    compare_prefix,
    find_char,
    itoa,
    map_indexed,
    rfind_char,
    split,
    substr,
    trim,
)


def test_split_on_separator_drops_empty_pieces():
    assert split("hello", "l") == ["he", "o"]


@pytest.mark.parametrize(
    "text, sep",
    [("  ls   -l  ", " "), ("/usr/bin:/bin::/sbin:", ":"), ("abc", " "), ("", " ")],
)
def test_split_invariants(text, sep):
    pieces = split(text, sep)
    assert all(pieces)
    assert all(sep not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(sep, "")


def test_split_command_line():
    assert split("grep  -v   foo", " ") == ["grep", "-v", "foo"]


def test_split_empty_text():
    assert split("", ":") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a::b", "::")


def test_atoi_negative():
    assert atoi("-234") == -234


def test_atoi_double_sign_gives_zero():
    assert atoi("-+234") == 0


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n+42abc") == 42


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0


@pytest.mark.parametrize("n", [2147483647, -2147483648, 1234, -1234, 0])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(2147483647) == "2147483647"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_trim_empty_set_keeps_text():
    assert trim("ohelloh", "") == "ohelloh"


def test_trim_everything():
    assert trim("-----------", "-") == ""


@pytest.mark.parametrize("text, chars", [("hello", "llo"), ("xxabcxx", "x"), ("abc", "z")])
def test_trim_result_is_inner_slice(text, chars):
    result = trim(text, chars)
    assert result in text
    if result:
        assert result[0] not in chars
        assert result[-1] not in chars


def test_substr_basic():
    assert substr("hello", 2, 3) == "llo"


def test_substr_clipped_to_end():
    text = "Hello world! Find a substring"
    result = substr(text, 15, 8)
    assert len(result) == 8
    assert text[15:].startswith(result)
    assert substr(text, 25, 100) == text[25:]


def test_substr_start_past_end():
    assert substr("Hello world! Find a substring", 50, 50) == ""


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_bounded_find_outside_limit():
    assert bounded_find("helloworld", "lowo", 6) is None


def test_bounded_find_empty_needle():
    assert bounded_find("helloworld", "", 6) == 0


def test_bounded_find_absent():
    assert bounded_find("helloworld", "hive", 6) is None


def test_bounded_find_within_limit():
    index = bounded_find("helloworld", "lowo", 10)
    assert "helloworld"[index:].startswith("lowo")
    assert bounded_find("helloworld", "lowo", 7) == index


def _alternate_case(i, c):
    return c.upper() if i % 2 == 0 else c.lower()


def test_map_indexed_alternating_case():
    text = "abcdefghijklmnopqrstuvwxyz"
    result = map_indexed(text, _alternate_case)
    assert len(result) == len(text)
    assert result.lower() == text
    assert all(ch.isupper() for ch in result[::2])
    assert all(ch.islower() for ch in result[1::2])


def test_map_indexed_empty():
    assert map_indexed("", _alternate_case) == ""


def test_compare_prefix_equal_within_n():
    assert compare_prefix("hello", "hellop", 2) == 0
    assert compare_prefix("hello", "hello", 10) == 0


def test_compare_prefix_shorter_string_sorts_first():
    assert compare_prefix("hello", "hellop", 6) < 0
    assert compare_prefix("hellop", "hello", 6) > 0


def test_compare_prefix_antisymmetric():
    assert compare_prefix("abc", "abd", 3) == -compare_prefix("abd", "abc", 3)


def test_compare_prefix_path_entry():
    assert compare_prefix("PATH=/bin", "PATH=", 5) == 0
    assert compare_prefix("HOME=/root", "PATH=", 5) != 0


def test_find_char_first_occurrence():
    text = "hello,world"
    index = find_char(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_find_char_missing_and_terminator():
    assert find_char("hello,world", "a") is None
    assert find_char("hello", "\0") == len("hello")


def test_rfind_char():
    assert rfind_char("abcdef", "a") == 0
    assert rfind_char("abcdef", "h") is None
    text = "hello,world"
    index = rfind_char(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]
    assert rfind_char("abc", "\0") == 3


def test_find_char_rejects_multi_char():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_bounded_copy_truncates():
    copied, length = bounded_copy("abcdefg", 6)
    assert copied == "abcde"
    assert length == len("abcdefg")


def test_bounded_copy_zero_size():
    assert bounded_copy("abcdefg", 0) == ("", 7)


def test_bounded_copy_fits():
    assert bounded_copy("abc", 10) == ("abc", 3)


def test_bounded_concat_partial():
    result, length = bounded_concat("hello", "world", 7)
    assert result == "hellow"
    assert length == len("helloworld")


def test_bounded_concat_no_room():
    assert bounded_concat("hello", "world", 3) == ("hello", 3 + len("world"))


def test_bounded_concat_full_room():
    assert bounded_concat("hello", "world", 20) == ("helloworld", 10)


def test_bounded_concat_negative_size_rejected():
    with pytest.raises(ValueError):
        bounded_concat("a", "b", -1)