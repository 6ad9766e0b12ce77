"""Tests for the descriptive statistics."""

import pickle

import numpy as np
import pytest

from Fina import EmptyInputError, describe, mean, rms, std_dev, variance


def test_mean():
    assert mean([1, 2, 3]) == 2.0


def test_variance_is_population_variance():
    assert variance([1, 2, 3]) == pytest.approx(2 / 3)
    assert variance([1, 2, 3]) == pytest.approx(np.var([1, 2, 3]))


def test_std_dev():
    assert std_dev([1, 2, 3]) == pytest.approx(0.8165, abs=1e-4)


def test_rms():
    assert rms([1, 2, 3]) == pytest.approx(2.1602, abs=1e-4)


@pytest.mark.parametrize(
    "data",
    [
        [1.0],
        [1, 2, 3],
        [-4.5, 0.0, 3.25, 1e3],
        np.linspace(-1, 1, 11),
    ],
)
def test_std_dev_squared_is_variance(data):
    assert std_dev(data) ** 2 == pytest.approx(variance(data))


def test_returns_python_float():
    assert isinstance(mean(np.array([1.0, 2.0])), float)
    assert isinstance(rms((3, 4)), float)


def test_input_is_not_mutated():
    data = np.array([3.0, 1.0, 2.0])
    variance(data)
    np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])


@pytest.mark.parametrize("func", [mean, variance, std_dev, rms, describe])
def test_empty_input(func):
    with pytest.raises(EmptyInputError, match="cannot be empty"):
        func([])


def test_empty_input_is_value_error():
    with pytest.raises(ValueError):
        mean([])


def test_rejects_two_dimensional_input():
    with pytest.raises(ValueError, match="one dimensional"):
        mean([[1, 2], [3, 4]])


def test_describe():
    d = describe([1, 2, 3])

    assert d.n == 3
    assert d.mean == 2.0
    assert d.variance == pytest.approx(2 / 3)
    assert d.std_dev == pytest.approx(std_dev([1, 2, 3]))
    assert d.rms == pytest.approx(rms([1, 2, 3]))
    assert d.minimum == 1.0
    assert d.maximum == 3.0


@pytest.mark.parametrize("what", ["Data", "Vectors"])
def test_empty_input_error_pickles(what):
    err = pickle.loads(pickle.dumps(EmptyInputError(what)))

    assert isinstance(err, EmptyInputError)
    assert err.what == what
    assert str(err) == f"{what} cannot be empty"
