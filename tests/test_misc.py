import io
from itertools import permutations

import pytest

from dsakit.misc import (
    MOD,
    check_subarray_sum,
    find_kth_bit,
    main,
    min_steps,
    padovan,
    permute,
    process_filename,
    single_number,
    smallest_distance_pair,
    sort_array,
)


@pytest.mark.parametrize(
    "text, expected",
    [("Two Sum.", "Two_Sum.cpp"), ("a.b c", "ab_c.cpp"), ("", ".cpp")],
)
def test_process_filename(text, expected):
    assert process_filename(text) == expected


def test_padovan_base_cases():
    assert [padovan(n) for n in range(3)] == [1, 1, 1]


@pytest.mark.parametrize("n", range(5, 60))
def test_padovan_identity(n):
    assert padovan(n) == padovan(n - 1) + padovan(n - 5)


def test_padovan_recurrence_modulo():
    for n in range(3, 300):
        assert padovan(n) == (padovan(n - 2) + padovan(n - 3)) % MOD


def test_padovan_negative_raises():
    with pytest.raises(ValueError):
        padovan(-1)


def test_find_kth_bit_first_and_middle():
    for n in range(1, 8):
        assert find_kth_bit(n, 1) == "0"
    for n in range(2, 8):
        assert find_kth_bit(n, 2 ** (n - 1)) == "1"


def test_find_kth_bit_mirror_is_inverted():
    n = 5
    size = 2**n
    middle = 2 ** (n - 1)
    for k in range(1, size):
        if k != middle:
            assert {find_kth_bit(n, k), find_kth_bit(n, size - k)} == {"0", "1"}


@pytest.mark.parametrize("n, k", [(0, 1), (3, 0), (3, 8)])
def test_find_kth_bit_out_of_range(n, k):
    with pytest.raises(ValueError):
        find_kth_bit(n, k)


def test_single_number():
    assert single_number([5, 5, 7, 9, 9]) == [7]
    assert single_number([3, 1, 2]) == sorted([3, 1, 2])
    assert single_number([]) == []


@pytest.mark.parametrize("prime", [2, 3, 5, 7, 13, 97])
def test_min_steps_prime(prime):
    assert min_steps(prime) == prime


@pytest.mark.parametrize("a, b", [(2, 9), (4, 25), (6, 7), (10, 10)])
def test_min_steps_is_additive(a, b):
    assert min_steps(a * b) == min_steps(a) + min_steps(b)


def test_min_steps_one():
    assert min_steps(1) == 0


def test_smallest_distance_pair_example():
    assert smallest_distance_pair([1, 3, 1], 1) == 0


def test_smallest_distance_pair_edges():
    nums = [1, 6, 1, 9]
    assert smallest_distance_pair(nums, 0) == 0
    assert smallest_distance_pair(nums, 7) == -1


def test_smallest_distance_pair_monotone():
    nums = [1, 6, 1, 9, 4]
    results = [smallest_distance_pair(nums, k) for k in range(1, 11)]
    assert results == sorted(results)
    assert max(results) == max(nums) - min(nums)


def test_smallest_distance_pair_negative_raises():
    with pytest.raises(ValueError):
        smallest_distance_pair([-1, 2], 1)


def test_permute_gives_every_ordering():
    nums = [1, 2, 3, 4]
    result = permute(nums)
    assert sorted(map(tuple, result)) == sorted(permutations(nums))
    assert result[0] == nums


def test_permute_leaves_input_alone():
    nums = [3, 1, 2]
    permute(nums)
    assert nums == [3, 1, 2]


def test_permute_empty():
    assert permute([]) == [[]]


def test_check_subarray_sum():
    assert check_subarray_sum([5, 5], 5) is True
    assert check_subarray_sum([0, 0], 1) is True
    assert check_subarray_sum([1], 1) is False


def test_check_subarray_sum_zero_k_raises():
    with pytest.raises(ZeroDivisionError):
        check_subarray_sum([1, 2], 0)


@pytest.mark.parametrize(
    "nums",
    [[38, 27, 43, 3, 9, 82, 10], [], [1], [5, -2, 5, 0, -2], list(range(20, 0, -1))],
)
def test_sort_array_matches_sorted(nums):
    original = list(nums)
    assert sort_array(nums) == sorted(original)
    assert nums == original


def test_main_with_arguments(capsys):
    assert main(["Two", "Sum."]) == 0
    assert capsys.readouterr().out == "Processed string: Two_Sum.cpp\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a b.c\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter the string: ")
    assert out.endswith("Processed string: a_bc.cpp\n")


def test_main_empty_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Processed string: .cpp\n")