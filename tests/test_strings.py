from itertools import combinations

import pytest

from dsakit.strings import (
    count_vowels_consonants,
    find_substring,
    longest_palindromic_subsequence,
    longest_prefix_suffix,
    longest_unique_substring,
    power_set,
    reverse_vowels,
)


def test_longest_unique_substring_example():
    assert longest_unique_substring("abcabcbb") == 3


@pytest.mark.parametrize("s", ["", "a", "abcdef", "xyz"])
def test_longest_unique_substring_distinct(s):
    assert longest_unique_substring(s) == len(s)


def test_longest_unique_substring_repeated():
    assert longest_unique_substring("aaaa") == 1


@pytest.mark.parametrize("s", ["abcba", "racecar", "aa", ""])
def test_palindrome_subsequence_of_palindrome(s):
    assert longest_palindromic_subsequence(s) == len(s)


def test_palindrome_subsequence_distinct_chars():
    assert longest_palindromic_subsequence("abcd") == 1


def test_palindrome_subsequence_mirrored():
    s = "geeks"
    assert longest_palindromic_subsequence(s + s[::-1]) == 2 * len(s)


def test_longest_prefix_suffix_example():
    assert longest_prefix_suffix("abab") == 2


@pytest.mark.parametrize("s", ["", "a", "abc"])
def test_longest_prefix_suffix_none(s):
    assert longest_prefix_suffix(s) == 0


@pytest.mark.parametrize("word", ["ab", "aab", "abcab", "a"])
def test_longest_prefix_suffix_separated(word):
    assert longest_prefix_suffix(word + "x" + word) == len(word)


def test_reverse_vowels_example():
    assert reverse_vowels("chiraggupta") == "charuggapti"


@pytest.mark.parametrize("s", ["hello", "Leetcode", "aA", "bcd", ""])
def test_reverse_vowels_involution_and_consonants(s):
    result = reverse_vowels(s)
    assert reverse_vowels(result) == s
    for original, new in zip(s, result):
        if original.lower() not in "aeiou":
            assert new == original


def test_count_vowels_only():
    s = "AEIOUaeiou"
    assert count_vowels_consonants(s) == (len(s), 0)


def test_count_consonants_only_and_non_letters():
    assert count_vowels_consonants("xyz") == (0, len("xyz"))
    assert count_vowels_consonants("123 !?") == (0, 0)


def test_count_total_is_letter_count():
    s = "Hello, World! 42"
    vowels, consonants = count_vowels_consonants(s)
    assert vowels + consonants == sum(ch.isalpha() for ch in s)


@pytest.mark.parametrize("s", ["", "a", "abc", "abcd"])
def test_power_set_contents(s):
    result = power_set(s)
    assert len(result) == 2 ** len(s)
    assert result[0] == ""
    assert result[-1] == s
    expected = {
        "".join(c) for r in range(len(s) + 1) for c in combinations(s, r)
    }
    assert set(result) == expected


def test_power_set_order():
    s = "ab"
    result = power_set(s)
    assert result[1] == s[-1]
    assert result[2] == s[0]


def test_find_substring_constructed():
    prefix = "xx"
    text = prefix + "foo" + "bar" + "yy"
    assert find_substring(text, ["bar", "foo"]) == [len(prefix)]


def test_find_substring_matches_are_permutations():
    text = "foobarfoobaz"
    words = ["foo", "bar"]
    for i in find_substring(text, words):
        chunk = text[i:i + 6]
        assert sorted([chunk[:3], chunk[3:]]) == sorted(words)
    assert find_substring(text, words)


def test_find_substring_empty_and_short():
    assert find_substring("abc", []) == []
    assert find_substring("ab", ["abc"]) == []


def test_find_substring_mixed_lengths():
    with pytest.raises(ValueError):
        find_substring("abcd", ["ab", "c"])