import pytest

from pipexpy.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_command_line():
    assert split("  ls -l  -a ", " ") == ["ls", "-l", "-a"]


def test_split_path_variable():
    assert split("/usr/bin:/bin::/usr/local/bin", ":") == ["/usr/bin", "/bin", "/usr/local/bin"]


@pytest.mark.parametrize("text", ["", "   ", " "])
def test_split_nothing_but_separators(text):
    assert split(text, " ") == []


@pytest.mark.parametrize("text", ["a b  c", "  grep -v foo ", "no-separators", "x y"])
def test_split_invariants(text):
    parts = split(text, " ")
    assert all(part and " " not in part for part in parts)
    assert "".join(parts) == text.replace(" ", "")


def test_split_accepts_int_separator():
    assert split("a,b,,c", ord(",")) == split("a,b,,c", ",")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_rejects_none():
    with pytest.raises(TypeError):
        split(None, " ")


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamps_length():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("/usr/bin", "/ls") == "/usr/bin/ls"
    assert strjoin("", "") == ""


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert strtrim("  hi  ", "") == "  hi  "


@pytest.mark.parametrize("text,c", [("hello", "l"), ("banana", "a"), ("xyz", "z")])
def test_strchr_first_occurrence(text, c):
    index = strchr(text, c)
    assert text[index] == c
    assert c not in text[:index]


def test_strchr_missing():
    assert strchr("hello", "q") is None


def test_strchr_terminator():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_int_argument():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


@pytest.mark.parametrize("text,c", [("hello", "l"), ("banana", "a"), ("xyz", "x")])
def test_strrchr_last_occurrence(text, c):
    index = strrchr(text, c)
    assert text[index] == c
    assert c not in text[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_limit():
    haystack, needle = "foo bar baz", "bar"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_needle_crosses_limit():
    assert strnstr("foo bar baz", "bar", 6) is None
    assert strnstr("foo bar baz", "bar", 7) == strnstr("foo bar baz", "bar", 11)


def test_strnstr_missing():
    assert strnstr("foo", "zz", 3) is None


def test_strncmp_equal_and_zero_length():
    assert strncmp("PATH=/bin", "PATH=", 5) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


@pytest.mark.parametrize("a,b", [("apple", "apply"), ("x", "xyz"), ("", "q")])
def test_strncmp_antisymmetric(a, b):
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strlcpy_truncates():
    assert strlcpy("hello", 4) == ("hel", len("hello"))


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("hi", 10) == ("hi", len("hi"))
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    assert strlcat("foo", "bar", 10) == ("foobar", len("foobar"))


def test_strlcat_truncates():
    assert strlcat("foo", "bar", 5) == ("foob", len("foobar"))


def test_strlcat_dest_fills_buffer():
    assert strlcat("foobar", "xy", 3) == ("foobar", 3 + len("xy"))


def test_strmapi_uses_char_and_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: c if i % 2 else "-") == "-a-"


def test_striteri_visits_every_character():
    calls = []
    striteri("abc", lambda i, c: calls.append((i, c)))
    assert calls == list(enumerate("abc"))


def test_striteri_none_raises():
    with pytest.raises(TypeError):
        striteri(None, lambda i, c: None)