from fractions import Fraction
from math import gcd

import pytest

from dsakit.strings import (
    INT_MAX,
    INT_MIN,
    common_chars,
    count_consistent_strings,
    count_seniors,
    find_min_difference,
    fraction_addition,
    get_lucky,
    longest_palindrome_length,
    min_length,
    my_atoi,
    shortest_palindrome,
    uncommon_from_sentences,
)


def test_common_chars_example():
    assert common_chars(["bella", "label", "roller"]) == ["e", "l", "l"]


def test_common_chars_single_word_is_its_sorted_letters():
    assert common_chars(["cool"]) == sorted("cool")


def test_common_chars_order_of_words_does_not_matter():
    words = ["cool", "lock", "cook"]
    assert common_chars(words) == common_chars(list(reversed(words)))


def test_common_chars_disjoint_words_and_empty_input():
    assert common_chars(["abc", "def", "ghi"]) == []
    assert common_chars([]) == []


def test_common_chars_never_exceeds_any_word():
    words = ["abc", "bca", "cab", "aabbcc"]
    result = common_chars(words)
    for word in words:
        for ch in set(result):
            assert result.count(ch) <= word.count(ch)


def test_count_consistent_strings_all_allowed():
    words = ["a", "b", "c", "abc", "ab"]
    assert count_consistent_strings("abc", words) == len(words)


def test_count_consistent_strings_ignores_words_with_other_letters():
    consistent = ["a", "b", "c", "abc", "ab"]
    assert count_consistent_strings("abc", consistent + ["d", "abd"]) == len(consistent)


def test_get_lucky_single_letter():
    assert get_lucky("a", 1) == 1


def test_get_lucky_settles_on_one_digit():
    settled = get_lucky("leetcode", 10)
    assert 0 < settled < 10
    assert get_lucky("leetcode", 11) == settled


def test_get_lucky_k_zero_matches_k_one():
    assert get_lucky("leetcode", 0) == get_lucky("leetcode", 1)


def test_get_lucky_rejects_non_lowercase():
    with pytest.raises(ValueError):
        get_lucky("Leet", 1)


@pytest.mark.parametrize("s", ["abcde", "aacecaaa", "abcd", "a", "abb"])
def test_shortest_palindrome_properties(s):
    result = shortest_palindrome(s)
    assert result == result[::-1]
    assert result.endswith(s)
    assert len(result) <= 2 * len(s) - 1


def test_shortest_palindrome_distinct_letters_needs_all_but_one():
    assert len(shortest_palindrome("abcde")) == 2 * len("abcde") - 1


def test_shortest_palindrome_keeps_palindromes_and_empty():
    assert shortest_palindrome("racecar") == "racecar"
    assert shortest_palindrome("") == ""


def _detail(age: int) -> str:
    return f"{'0' * 10}M{age:02d}01"


def test_count_seniors_counts_only_over_sixty():
    seniors = [_detail(age) for age in (61, 75, 92)]
    others = [_detail(age) for age in (60, 40, 5)]
    assert count_seniors(seniors + others) == len(seniors)


def test_count_seniors_rejects_short_record():
    with pytest.raises(ValueError):
        count_seniors(["short"])


def test_min_length_nested_pairs_vanish():
    assert min_length("ACDB" * 3) == 0


def test_min_length_without_removable_pairs_keeps_everything():
    assert min_length("BADC") == len("BADC")


@pytest.mark.parametrize("s", ["ACBDCBAD", "AABB", "ABCD", "AABCDDCBAA", "XAB"])
def test_min_length_parity_and_bound(s):
    result = min_length(s)
    assert result <= len(s)
    assert (len(s) - result) % 2 == 0


def test_longest_palindrome_length_mirrored_string_uses_everything():
    half = "abcde"
    s = half + half[::-1]
    assert longest_palindrome_length(s) == len(s)


def test_longest_palindrome_length_is_case_sensitive():
    assert longest_palindrome_length("Aa") == longest_palindrome_length("Ab")


def test_longest_palindrome_length_one_odd_group_uses_everything():
    assert longest_palindrome_length("aaabb") == len("aaabb")


def test_find_min_difference_wraps_midnight():
    assert find_min_difference(["23:59", "00:00"]) == 1


def test_find_min_difference_duplicates_are_zero():
    assert find_min_difference(["12:34", "12:34", "01:00"]) == 0


def test_find_min_difference_single_point_is_whole_day():
    assert find_min_difference(["12:34"]) == 1440


def test_find_min_difference_order_does_not_matter():
    points = ["23:59", "00:00", "12:34"]
    assert find_min_difference(points) == find_min_difference(sorted(points))


def test_find_min_difference_empty_raises():
    with pytest.raises(ValueError):
        find_min_difference([])


def test_fraction_addition_matches_fraction_arithmetic():
    result = fraction_addition("1/2+2/5-3/2")
    assert Fraction(result) == Fraction(1, 2) + Fraction(2, 5) - Fraction(3, 2)


def test_fraction_addition_result_is_reduced():
    numerator, denominator = map(int, fraction_addition("-1/2+1/2+1/3").split("/"))
    assert denominator > 0
    assert gcd(numerator, denominator) == 1


def test_fraction_addition_zero_and_empty():
    assert fraction_addition("1/3-1/3") == "0/1"
    assert fraction_addition("") == "0/1"


def test_fraction_addition_malformed_raises():
    with pytest.raises(ValueError):
        fraction_addition("1/2+x")


def test_uncommon_from_sentences_example():
    assert uncommon_from_sentences("this apple is sweet", "this apple is sour") == ["sour", "sweet"]


def test_uncommon_from_sentences_is_symmetric():
    s1, s2 = "apple apple", "banana"
    assert uncommon_from_sentences(s1, s2) == uncommon_from_sentences(s2, s1) == ["banana"]


@pytest.mark.parametrize("value", [0, 7, -248, 42, INT_MAX, INT_MIN])
def test_my_atoi_round_trip(value):
    assert my_atoi(str(value)) == value


def test_my_atoi_spaces_and_trailing_text():
    assert my_atoi("   -42 with words") == -42
    assert my_atoi("words 987") == 0
    assert my_atoi("+-12") == 0


def test_my_atoi_clamps():
    assert my_atoi(str(INT_MAX + 1)) == INT_MAX
    assert my_atoi(str(INT_MIN - 1)) == INT_MIN
    assert my_atoi("-" + "9" * 30) == INT_MIN