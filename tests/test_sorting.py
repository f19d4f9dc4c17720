import pytest

from dstextbook.sorting import (
    interval_sort,
    merge_sort,
    merge_sort_steps,
    radix_sort,
    radix_sort_steps,
    shell_sort,
    shell_sort_steps,
    tree_sort,
)

SAMPLE = [69, 10, 30, 2, 16, 8, 31, 22]


def test_interval_sort_touches_only_its_positions():
    values = [5, 1, 4, 2, 3, 0]
    original = list(values)
    interval_sort(values, 0, 5, 2)
    assert values[0::2] == sorted(original[0::2])
    assert values[1::2] == original[1::2]


def test_interval_sort_rejects_bad_interval():
    with pytest.raises(ValueError):
        interval_sort([3, 2, 1], 0, 2, 0)


def test_interval_sort_rejects_out_of_range_end():
    with pytest.raises(IndexError):
        interval_sort([3, 2, 1], 0, 5, 1)


def test_shell_sort_sample():
    assert shell_sort(SAMPLE) == sorted(SAMPLE)


def test_shell_sort_intervals_halve():
    steps = shell_sort_steps(SAMPLE)
    assert [interval for interval, _ in steps] == [4, 2, 1]
    assert list(steps[-1][1]) == sorted(SAMPLE)


def test_shell_sort_does_not_modify_input():
    values = list(SAMPLE)
    shell_sort(values)
    assert values == SAMPLE


def test_shell_sort_empty():
    assert shell_sort([]) == []


def test_merge_sort_sample():
    assert merge_sort(SAMPLE) == sorted(SAMPLE)


def test_merge_sort_steps_one_per_merge():
    steps = merge_sort_steps(SAMPLE)
    assert len(steps) == len(SAMPLE) - 1
    assert all(sorted(step) == sorted(SAMPLE) for step in steps)
    assert list(steps[-1]) == sorted(SAMPLE)


def test_merge_sort_first_merge_orders_first_pair():
    first = merge_sort_steps(SAMPLE)[0]
    assert list(first[:2]) == sorted(SAMPLE[:2])
    assert list(first[2:]) == SAMPLE[2:]


def test_merge_sort_single_and_empty():
    assert merge_sort([7]) == [7]
    assert merge_sort([]) == []


def test_radix_sort_sample():
    assert radix_sort(SAMPLE) == sorted(SAMPLE)


def test_radix_first_pass_groups_by_last_digit():
    first = radix_sort_steps(SAMPLE)[0]
    assert list(first) == [10, 30, 31, 2, 22, 16, 8, 69]
    assert list(first) == sorted(SAMPLE, key=lambda v: v % 10)


def test_radix_sort_needs_enough_digits():
    values = [305, 12, 999, 40]
    assert radix_sort(values, digits=None) == sorted(values)
    assert len(radix_sort_steps(values, digits=None)) == 3


def test_radix_sort_other_radix():
    values = [5, 3, 7, 1, 0, 6]
    assert radix_sort(values, radix=2, digits=3) == sorted(values)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_radix_sort_rejects_bad_radix():
    with pytest.raises(ValueError):
        radix_sort([3, 1], radix=1)


def test_tree_sort_sample():
    assert tree_sort(SAMPLE) == sorted(SAMPLE)


def test_tree_sort_drops_duplicates():
    values = [3, 1, 3, 2, 1]
    assert tree_sort(values) == sorted(set(values))


def test_tree_sort_empty():
    assert tree_sort([]) == []


@pytest.mark.parametrize("sorter", [shell_sort, merge_sort, tree_sort])
def test_sorters_agree_on_distinct_values(sorter):
    values = [42, 7, 19, 3, 88, 51, 0, 64, 23]
    assert sorter(values) == sorted(values)