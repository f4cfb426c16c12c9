import pytest

from algokit.text import (
    is_anagram,
    is_palindrome_string,
    is_valid_parentheses,
    length_of_last_word,
    longest_common_prefix,
    str_str,
)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("abc", "cab", True),
        ("thanos", "sonata", False),
        ("ab", "abc", False),
    ],
)
def test_is_anagram(first, second, expected):
    assert is_anagram(first, second) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", 5),
        ("   fly me   to   the moon  ", 4),
        ("luffy is still joyboy", 6),
        ("luffy", 5),
        ("    luffy     ", 5),
        ("", 0),
        ("a", 1),
        ("    ", 0),
    ],
)
def test_length_of_last_word(text, expected):
    assert length_of_last_word(text) == expected


@pytest.mark.parametrize(
    "strs, expected",
    [
        (["flower", "flow", "flight"], "fl"),
        (["dog", "racecar", "car"], ""),
        (["", "apple", "banana"], ""),
        (["prefix", "prefixed", "prefix"], "prefix"),
        (["single"], "single"),
    ],
)
def test_longest_common_prefix(strs, expected):
    assert longest_common_prefix(strs) == expected


def test_longest_common_prefix_rejects_empty_list():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        ("abba", True),
        ("abcbac", False),
        ("", True),
        ("a", True),
        ("ab", False),
        ("0P", False),
        ("1001", True),
    ],
)
def test_is_palindrome_string(text, expected):
    assert is_palindrome_string(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
        ("([)]", False),
        ("{[]}", True),
        ("}(){", False),
        ("[", False),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("hello", "ll", 2),
        ("aaaaa", "baa", -1),
        ("", "", 0),
        ("abcddaaw", "aaaw", -1),
        ("abc", "abcd", -1),
        ("abc", "", 0),
    ],
)
def test_str_str(haystack, needle, expected):
    assert str_str(haystack, needle) == expected