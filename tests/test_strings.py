import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.strings import (
    charat,
    strcat,
    strchr,
    strcmp,
    strcpy,
    strdup,
    strequ,
    strlcat,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strnequ,
    strnstr,
    strrchr,
    strstr,
)

text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=255))


def _sign(x):
    return (x > 0) - (x < 0)


def test_strlen_counts_up_to_nul():
    assert strlen("hello") == len("hello")
    assert strlen("ab\0cd") == len("ab")
    assert strlen("") == 0


def test_strlen_rejects_non_string():
    with pytest.raises(TypeError):
        strlen(None)


@given(text)
def test_strdup_round_trip(s):
    assert strdup(s) == s


def test_strcpy_gives_source():
    assert strcpy("previous contents", "new") == "new"


def test_strncpy_short_source_is_terminated():
    assert strncpy("abcdefgh", "xy", 5) == "xy"


def test_strncpy_long_source_keeps_rest_of_destination():
    assert strncpy("abcdefgh", "wxyz", 3) == "wxy" + "defgh"


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strncpy_prefix_invariant(dst, src, n):
    result = strncpy(dst, src, n)
    assert result.startswith(src[:n])
    if len(src) < n:
        assert result == src


def test_strcat_and_strncat():
    assert strcat("foo", "bar") == "foo" + "bar"
    assert strncat("foo", "barbaz", 3) == "foo" + "bar"
    assert strncat("foo", "ba", 10) == "foo" + "ba"


def test_strlcat_with_enough_room():
    result, total = strlcat("foo", "bar", 100)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_with_no_room():
    result, total = strlcat("foo", "bar", len("foo"))
    assert result == "foo"
    assert total == len("foo") + len("bar")


def test_strlcat_with_size_below_destination():
    result, total = strlcat("foobar", "xyz", 2)
    assert result == "foobar"
    assert total == 2 + len("xyz")


def test_strlcat_truncates_to_fit_terminator():
    result, total = strlcat("ab", "cdef", len("ab") + 3)
    assert result == "ab" + "cd"
    assert total == len("ab") + len("cdef")


@given(text, text, st.integers(min_value=0, max_value=60))
def test_strlcat_never_exceeds_buffer(dst, src, size):
    result, total = strlcat(dst, src, size)
    assert result.startswith(dst)
    assert total == min(len(dst), size) + len(src)
    if len(dst) < size:
        assert len(result) <= size - 1


def test_strchr_cases():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", ord("o")) == "hello".index("o")
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strrchr_cases():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


@given(text, st.characters(min_codepoint=1, max_codepoint=255))
def test_strchr_matches_find(s, c):
    found = s.find(c)
    assert strchr(s, c) == (None if found < 0 else found)
    rfound = s.rfind(c)
    assert strrchr(s, c) == (None if rfound < 0 else rfound)


def test_strchr_rejects_long_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strstr_cases():
    assert strstr("haystack", "") == 0
    assert strstr("haystack", "st") == "haystack".index("st")
    assert strstr("haystack", "needle") is None


def test_strnstr_respects_length():
    assert strnstr("abcdef", "def", 5) is None
    assert strnstr("abcdef", "def", 6) == "abcdef".index("def")
    assert strnstr("abc", "", 0) == 0


@given(text, text)
def test_strstr_matches_find(hay, needle):
    found = hay.find(needle)
    assert strstr(hay, needle) == (None if found < 0 else found)


def test_strcmp_cases():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abd", "abc") == ord("d") - ord("c")
    assert strcmp("ab\0x", "ab\0y") == 0


@given(text, text)
def test_strcmp_antisymmetric_and_ordered(a, b):
    assert strcmp(a, b) == -strcmp(b, a)
    assert _sign(strcmp(a, b)) == _sign((a > b) - (a < b))


def test_strncmp_cases():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) == ord("x") - ord("y")
    assert strncmp("anything", "else", 0) == 0
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_charat_cases():
    assert charat("hello", "e") == "hello".index("e")
    assert charat("hello", "z") == -1
    assert charat("hello", "\0") == len("hello")
    assert charat(None, "a") == -1


def test_strequ_and_strnequ():
    assert strequ("same", "same") is True
    assert strequ("same", "diff") is False
    assert strequ(None, "x") is False
    assert strnequ("prefix-a", "prefix-b", len("prefix-")) is True
    assert strnequ("prefix-a", "prefix-b", len("prefix-a")) is False
    assert strnequ("x", None, 1) is False