import pytest

from fractscope.textops import split, strdup, striteri, strjoin, strmapi, strtrim, substr


def test_strdup_copies_text():
    assert strdup("fract-ol") == "fract-ol"


def test_strdup_stops_at_nul():
    assert strdup("abc\0def") == "abc"


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_middle():
    assert substr("mandelbrot", 6, 4) == "brot"


def test_substr_clamps_length():
    assert substr("julia", 2, 100) == "lia"


def test_substr_start_past_end_is_empty():
    assert substr("julia", 5, 3) == ""
    assert substr("julia", 50, 3) == ""


def test_substr_zero_length_is_empty():
    assert substr("julia", 1, 0) == ""


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("julia", start, length)


def test_strjoin_concatenates():
    left, right = "burning", "_ship"
    result = strjoin(left, right)
    assert result.startswith(left)
    assert result.endswith(right)
    assert len(result) == len(left) + len(right)


def test_strjoin_ignores_text_after_nul():
    assert strjoin("ab\0x", "cd\0y") == "abcd"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin("a", None)


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  spaced  ", "") == "  spaced  "


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_accepts_code_point():
    assert split("a,b,,c", ord(",")) == ["a", "b", "c"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_empty_string():
    assert split("", ",") == []


def test_split_rejoin_round_trip():
    words = ["one", "two", "three"]
    assert split(":".join(words), ":") == words


def test_split_rejects_long_separator():
    with pytest.raises(TypeError):
        split("a b", "ab")


def test_strmapi_passes_index_and_char():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_strmapi_preserves_length():
    text = "fractal"
    assert len(strmapi(text, lambda i, ch: "*")) == len(text)


def test_strmapi_rejects_none_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_changes_list_in_place():
    buf = list("abc")
    striteri(buf, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert buf == ["A", "b", "C"]


def test_striteri_stops_at_zero_byte():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"AB\0cd")


def test_striteri_rejects_none_function():
    with pytest.raises(TypeError):
        striteri(list("abc"), None)