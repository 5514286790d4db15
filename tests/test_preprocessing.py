"""Tests for number parsing and attribute vectors."""

import math

import numpy as np
import pytest

from diversitygraph.config import ATTRIBUTE_FIELDS
from diversitygraph.preprocessing import (
    attribute_vector,
    build_attribute_matrix,
    parse_number,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (42, 42.0),
        (12.5, 12.5),
        ("36.33", 36.33),
        ("  7 ", 7.0),
        ("4.1%", 4.1),
        ("-3.5", -3.5),
        (".5", 0.5),
        ("1e2", 100.0),
        (np.float64(2.5), 2.5),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (True, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        ([1, 2], 0.0),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == pytest.approx(expected)


def test_attribute_vector_uses_field_order(company_a):
    vector = attribute_vector(company_a)

    assert len(vector) == len(ATTRIBUTE_FIELDS) == 8
    assert vector == (40.0, 60.0, 50.0, 20.0, 10.0, 10.0, 5.0, 5.0)


def test_attribute_vector_is_independent_of_key_order(company_a):
    shuffled = dict(reversed(list(company_a.items())))
    assert attribute_vector(shuffled) == attribute_vector(company_a)


def test_attribute_vector_defaults_missing_and_invalid_to_zero():
    record = {"company": "Sparse", "female": "n/a", "white": "61.2"}

    vector = attribute_vector(record)

    assert vector == (0.0, 0.0, 61.2, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert all(math.isfinite(v) for v in vector)


def test_attribute_vector_custom_fields(company_a):
    assert attribute_vector(company_a, ("male", "female")) == (60.0, 40.0)


def test_build_attribute_matrix_shape(company_a, company_b):
    matrix = build_attribute_matrix([company_a, company_b])

    assert matrix.shape == (2, 8)
    np.testing.assert_allclose(matrix[1], attribute_vector(company_b))


def test_build_attribute_matrix_empty():
    matrix = build_attribute_matrix([])
    assert matrix.shape == (0, 8)


def test_build_attribute_matrix_requires_fields(company_a):
    with pytest.raises(ValueError):
        build_attribute_matrix([company_a], fields=())
