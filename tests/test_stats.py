import math

import pytest

from numbasics.stats import average, largest, standard_deviation


def test_average_of_constant_values_is_that_value():
    assert average([4.5, 4.5, 4.5]) == pytest.approx(4.5)


@pytest.mark.parametrize("values", [[1.0, 2.5, 7.25], [-3.0, 3.0], [10.0]])
def test_average_times_count_is_sum(values):
    assert average(values) * len(values) == pytest.approx(math.fsum(values))


def test_average_accepts_hundred_elements():
    assert average([2.0] * 100) == pytest.approx(2.0)


@pytest.mark.parametrize("count", [0, 101])
def test_average_rejects_out_of_range_count(count):
    with pytest.raises(ValueError):
        average([1.0] * count)


def test_standard_deviation_of_constant_is_zero():
    assert standard_deviation([3.0] * 10) == pytest.approx(0.0)


def test_standard_deviation_of_one_to_ten():
    assert standard_deviation(list(range(1, 11))) == pytest.approx(2.8722813232690143)


def test_standard_deviation_is_shift_invariant():
    data = [1.0, 4.0, 9.0, 16.0, 25.0]
    shifted = [v + 100.0 for v in data]
    assert standard_deviation(shifted) == pytest.approx(standard_deviation(data))


def test_standard_deviation_scales_linearly():
    data = [2.0, 3.0, 5.0, 7.0, 11.0]
    scaled = [v * 3.0 for v in data]
    assert standard_deviation(scaled) == pytest.approx(3.0 * standard_deviation(data))


def test_standard_deviation_rejects_empty():
    with pytest.raises(ValueError):
        standard_deviation([])


def test_largest_picks_maximum():
    assert largest([1.0, 5.0, 3.0]) == 5.0


def test_largest_with_negatives():
    assert largest([-7.5, -2.25, -9.0]) == -2.25


def test_largest_with_ties():
    assert largest([4.0, 4.0, 1.0]) == 4.0


def test_largest_rejects_empty():
    with pytest.raises(ValueError):
        largest([])