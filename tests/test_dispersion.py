"""Test sample and population variance and standard deviation."""

import math

import numpy as np

from descstats.stats import (
    mean,
    median,
    median_high,
    median_low,
    mode,
    population_standard_deviation,
    population_variance,
    standard_deviation,
    variance,
)


def test_variance_reference_value():
    xs = [2.75, 1.75, 1.25, 0.25, 0.5, 1.25, 3.5]
    assert math.isclose(variance(xs), 1.3720238095238095, rel_tol=1e-12)


def test_population_variance_reference_value():
    xs = [0.0, 0.25, 0.25, 1.25, 1.5, 1.75, 2.75, 3.25]
    assert population_variance(xs) == 1.25


def test_standard_deviation_reference_value():
    xs = [1.5, 2.5, 2.5, 2.75, 3.25, 4.75]
    assert math.isclose(standard_deviation(xs), 1.0810874155219827, rel_tol=1e-12)


def test_sample_estimators_need_two_points():
    assert variance([]) is None
    assert variance([2.0]) is None
    assert standard_deviation([]) is None
    assert standard_deviation([2.0]) is None


def test_population_estimators_need_one_point():
    assert population_variance([]) is None
    assert population_standard_deviation([]) is None
    assert population_variance([2.0]) == 0.0
    assert population_standard_deviation([2.0]) == 0.0


def test_constant_sample_has_zero_spread():
    assert variance([3.0, 3.0, 3.0]) == 0.0
    assert standard_deviation([3.0, 3.0, 3.0]) == 0.0


def test_population_variance_not_above_sample_variance():
    rng = np.random.default_rng(11)
    for size in range(2, 15):
        xs = list(rng.uniform(-10.0, 10.0, size=size))
        v = variance(xs)
        assert v >= 0.0
        assert math.isfinite(v)
        assert population_variance(xs) <= v


def test_standard_deviation_is_root_of_variance():
    xs = [1.0, 2.0, 3.0, 4.0]
    assert math.isclose(variance(xs), 5.0 / 3.0)
    assert population_variance(xs) == 1.25
    assert standard_deviation(xs) == math.sqrt(variance(xs))
    assert population_standard_deviation(xs) == math.sqrt(population_variance(xs))


def test_input_is_not_mutated():
    xs = [4.0, 1.0, 3.0]
    arr = np.array(xs)
    for fn in (
        variance,
        population_variance,
        standard_deviation,
        population_standard_deviation,
    ):
        fn(xs)
        fn(arr)
    assert xs == [4.0, 1.0, 3.0]
    assert arr.tolist() == [4.0, 1.0, 3.0]


def test_repeated_calls_are_identical_for_every_statistic():
    xs = [2.5, 0.5, 2.5, 7.0, 1.0]
    snapshot = list(xs)
    for fn in (
        mean,
        median,
        median_low,
        median_high,
        mode,
        variance,
        population_variance,
        standard_deviation,
        population_standard_deviation,
    ):
        first = fn(xs)
        assert all(fn(xs) == first for _ in range(5))
    assert xs == snapshot
