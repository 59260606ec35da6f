import pytest
from smartedit.matcher import find_all, failure_table, PatternMatcher


def _brute(text: str, pattern: str) -> list[int]:
    if not pattern:
        return []
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def test_ban_in_banana_bandana_band():
    assert find_all("banana bandana band", "ban") == [0, 7, 15]


def test_overlapping_matches_are_reported():
    assert find_all("aaaa", "aa") == [0, 1, 2]
    assert find_all("abababab", "abab") == [0, 2, 4]


def test_empty_pattern_matches_nothing():
    assert find_all("anything", "") == []
    assert find_all("", "") == []


def test_pattern_longer_than_text():
    assert find_all("ab", "abc") == []
    assert find_all("", "a") == []


def test_case_sensitive():
    assert find_all("Ban ban", "ban") == [4]


@pytest.mark.parametrize("pattern, table", [
    ("abab", [0, 0, 1, 2]),
    ("aaa", [0, 1, 2]),
    ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
    ("abc", [0, 0, 0]),
])
def test_failure_table(pattern, table):
    assert failure_table(pattern) == table


@pytest.mark.parametrize("text, pattern", [
    ("abracadabra", "abra"),
    ("mississippi", "issi"),
    ("aabaaabaaab", "aab"),
    ("the cat sat on the mat", "at"),
    ("xxxxxxxxxx", "xxx"),
    ("abcabcabd", "abcabd"),
])
def test_matches_brute_force(text, pattern):
    got = find_all(text, pattern)
    assert got == _brute(text, pattern)
    for off in got:
        assert text[off:off + len(pattern)] == pattern
    assert got == sorted(set(got))


def test_inputs_must_be_strings():
    with pytest.raises(TypeError):
        find_all(None, "a")
    with pytest.raises(TypeError):
        find_all("a", None)


def test_matcher_object_seam():
    assert PatternMatcher().find_all("banana", "ana") == [1, 3]
