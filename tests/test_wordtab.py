from solong.wordtab import find, find_outside_quotes, split_words


def test_find_locates_needle():
    text = "hello world"
    pos = find(text, "world", len(text))
    assert text[pos:pos + 5] == "world"
    assert pos == 6


def test_find_missing_needle():
    assert find("abc", "z", 3) == -1


def test_find_needle_longer_than_length():
    assert find("abcdef", "abc", 2) == -1


def test_find_outside_quotes_skips_quoted_match():
    text = '"//" // x'
    pos = find_outside_quotes(text, "//", len(text))
    assert pos == 5
    assert find(text, "//", len(text)) == 1


def test_find_outside_quotes_only_quoted():
    text = '"/*x*/"'
    assert find_outside_quotes(text, "/*", len(text)) == -1


def test_find_outside_quotes_unquoted_start():
    text = "/* c */"
    assert find_outside_quotes(text, "/*", len(text)) == 0


def test_split_words_spaces_and_tabs():
    assert split_words(" a\tb  c \t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_other_characters():
    words = split_words("#FF0000\tc  none")
    assert words == ["#FF0000", "c", "none"]