"""Tests for matrix generation and the generation Result type."""

import pytest

from qrsvg.engine.context import EMPTY_STATE
from qrsvg.engine.generation import generate, resolve
from qrsvg.engine.matrix import generate_matrix
from qrsvg.errors import GenerationError, QRSvgError
from tests.conftest import OVERSIZED_VALUE, SMALL_MATRIX, fake_generator


def test_generate_matrix_is_square():
    matrix = generate_matrix("hello", "M")
    assert len(matrix) == 21  # version 1, no quiet zone
    assert all(len(row) == len(matrix) for row in matrix)
    assert all(isinstance(cell, bool) for row in matrix for cell in row)


def test_generate_matrix_finder_pattern():
    matrix = generate_matrix("hello", "L")
    # Top-left finder: dark 7×7 border, light ring, dark 3×3 core
    assert all(matrix[0][:7])
    assert not any(matrix[1][1:6])
    assert all(matrix[3][2:5])


def test_higher_ecl_needs_more_modules():
    text = "The quick brown fox jumps over the lazy dog"
    assert len(generate_matrix(text, "H")) > len(generate_matrix(text, "L"))


def test_unknown_ecl():
    with pytest.raises(GenerationError, match="error correction level"):
        generate_matrix("hello", "X")


def test_empty_value():
    with pytest.raises(GenerationError, match="No input text"):
        generate_matrix("", "M")


def test_over_capacity():
    with pytest.raises(GenerationError):
        generate_matrix(OVERSIZED_VALUE, "H")


def test_generation_error_is_qrsvg_error():
    assert issubclass(GenerationError, QRSvgError)


def test_generate_ok():
    result = generate("abc", 30, "Q", fake_generator(SMALL_MATRIX))
    assert result.ok
    state = result.unwrap()
    assert state.key == ("abc", 30, "Q")
    assert state.cell_size == 10
    assert state.module_count == 3
    assert state.path.d.startswith("M0 5 L10 5")


def test_generate_failure_is_a_value():
    result = generate(OVERSIZED_VALUE, 100, "H")
    assert not result.ok
    assert isinstance(result.error, GenerationError)
    assert result.state is EMPTY_STATE
    with pytest.raises(GenerationError):
        result.unwrap()


def test_resolve_without_handler_raises():
    result = generate(OVERSIZED_VALUE, 100, "H")
    with pytest.raises(GenerationError):
        resolve(result)


def test_resolve_with_handler_returns_empty_state():
    seen = []
    result = generate(OVERSIZED_VALUE, 100, "H")
    state = resolve(result, seen.append)
    assert state is EMPTY_STATE
    assert state.is_empty
    assert state.key is None
    assert seen == [result.error]


def test_resolve_success_ignores_handler():
    seen = []
    result = generate("abc", 30, "M", fake_generator(SMALL_MATRIX))
    assert resolve(result, seen.append) is result.state
    assert seen == []
