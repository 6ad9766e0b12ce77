"""Tests for the activation functions."""

import math

import numpy as np
import pytest

from Fina import (
    LEAKY_RELU_ALPHA,
    EmptyInputError,
    leaky_relu,
    relu,
    sigmoid,
    softmax,
    tanh_act,
)


def test_sigmoid():
    assert sigmoid(1.0) == pytest.approx(0.7311, abs=1e-4)
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("x", [-1000.0, -745.0, -50.0, 50.0, 745.0, 1000.0])
def test_sigmoid_is_stable_for_large_inputs(x):
    value = sigmoid(x)

    assert math.isfinite(value)
    assert 0.0 <= value <= 1.0


def test_sigmoid_limits():
    assert sigmoid(1000.0) == 1.0
    assert sigmoid(-1000.0) == pytest.approx(0.0, abs=1e-300)


def test_sigmoid_symmetry():
    for x in (0.1, 2.5, 30.0):
        assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_relu():
    assert relu(-2.0) == 0.0
    assert relu(0.0) == 0.0
    assert relu(3.5) == 3.5


def test_leaky_relu():
    assert leaky_relu(-2.0, 0.1) == -0.2
    assert leaky_relu(2.0, 0.1) == 2.0
    assert leaky_relu(0.0, 0.1) == 0.0


def test_leaky_relu_conventional_alpha():
    assert LEAKY_RELU_ALPHA == 0.01
    assert leaky_relu(-100.0, LEAKY_RELU_ALPHA) == pytest.approx(-1.0)


def test_tanh_act():
    assert tanh_act(1.0) == pytest.approx(0.7616, abs=1e-4)
    assert tanh_act(0.0) == 0.0


def test_softmax():
    out = softmax([1.0, 2.0, 3.0])
    expected = np.exp([1.0, 2.0, 3.0]) / np.sum(np.exp([1.0, 2.0, 3.0]))

    np.testing.assert_allclose(out, expected)
    assert out.sum() == pytest.approx(1.0)


def test_softmax_large_values():
    out = softmax([1000.0, 1000.0])

    np.testing.assert_allclose(out, [0.5, 0.5])


def test_softmax_empty():
    with pytest.raises(EmptyInputError):
        softmax([])
