# tests/test_weather_utils.py
from __future__ import annotations

import math

import numpy as np

import src.api.weather_utils as wu


def test_as_int_and_as_float():
    assert wu.as_int(10) == 10
    assert wu.as_int(10.9) == 10
    assert wu.as_int("12") == 12
    assert wu.as_int(None) is None

    assert wu.as_float(10) == 10.0
    assert wu.as_float("10.5") == 10.5
    assert wu.as_float("12,5") == 12.5
    assert wu.as_float(None) is None


def test_nan_and_numpy_values():
    assert wu.as_float(math.nan) is None
    assert wu.as_int(np.float64("nan")) is None
    assert wu.as_int(np.int64(7)) == 7
    assert wu.as_float(np.float32(1.5)) == 1.5


def test_unreadable_values_are_none():
    assert wu.as_float("warm") is None
    assert wu.as_int([1, 2]) is None
    assert wu.as_float(True) is None


def test_as_str():
    assert wu.as_str(5969785) == "5969785"
    assert wu.as_str(None) is None


def test_value_at():
    assert wu.value_at([1, 2], 1) == 2
    assert wu.value_at([1, 2], 2) is None
    assert wu.value_at(None, 0) is None
    assert wu.value_at([], 0) is None
