import re

import pytest

from cgkit.randomgen import generate, generate_matrix, generate_session


def test_generate_length_and_range():
    values = generate(16, 0.0, 1.0)
    assert len(values) == 16
    assert all(0.0 <= v < 1.0 for v in values)


def test_fixed_seed_is_repeatable():
    first = generate(8, -5.0, 5.0, seed=42)
    second = generate(8, -5.0, 5.0, seed=42)
    assert len(first) == 8
    assert all(-5.0 <= v < 5.0 for v in first)
    assert first == second


def test_different_seeds_differ():
    assert generate(8, 0.0, 1.0, seed=1) != generate(8, 0.0, 1.0, seed=2)


def test_generate_zero_dim():
    assert generate(0, 0.0, 1.0) == []


def test_generate_rejects_bad_input():
    with pytest.raises(ValueError):
        generate(3, 2.0, 1.0)
    with pytest.raises(ValueError):
        generate(-1, 0.0, 1.0)


def test_matrix_shape_and_range():
    matrix = generate_matrix(4, 3, 10.0, 20.0, seed=7)
    assert len(matrix) == 4
    assert all(len(row) == 3 for row in matrix)
    assert all(10.0 <= v < 20.0 for row in matrix for v in row)
    assert matrix == generate_matrix(4, 3, 10.0, 20.0, seed=7)


def test_matrix_rejects_bad_input():
    with pytest.raises(ValueError):
        generate_matrix(-1, 3, 0.0, 1.0)
    with pytest.raises(ValueError):
        generate_matrix(2, 2, 1.0, 0.0)


def test_session_default_format():
    session = generate_session()
    parts = session.split("-")
    assert len(parts) == 4
    assert parts[-1] == "object"
    assert all(len(p) == 6 for p in parts[:-1])
    assert re.fullmatch(r"\d{6}-\d{6}-\d{6}-object", session) is not None


def test_session_custom_key_and_size():
    session = generate_session("node", 5)
    parts = session.split("-")
    assert parts[-1] == "node"
    assert len(parts) == 6
    assert all(100000 <= int(p) < 999999 for p in parts[:-1])