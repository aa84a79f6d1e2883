"""Tests for path rasterization and text rendering."""

import numpy as np

from qrsvg.engine.matrix import generate_matrix
from qrsvg.engine.path_compiler import compile_path
from qrsvg.utils.rasterizer import (
    grid_fill_percentage,
    grid_to_halfblock,
    grid_to_text,
    matrix_to_grid,
    rasterize_path,
)
from tests.conftest import SMALL_MATRIX


def test_rasterize_small_matrix():
    grid = rasterize_path("M0 5 L10 5 M20 5 L30 5 M10 15 L20 15 M0 25 L30 25", 10, 3)
    assert np.array_equal(grid, matrix_to_grid(SMALL_MATRIX))


def test_rasterize_empty_path():
    grid = rasterize_path("", 10, 4)
    assert grid.shape == (4, 4)
    assert not grid.any()


def test_real_code_round_trip():
    matrix = generate_matrix("https://example.com/some/longer/path?q=1", "Q")
    n = len(matrix)
    cell = 256 / n
    grid = rasterize_path(compile_path(matrix, cell).d, cell, n)
    assert np.array_equal(grid, matrix_to_grid(matrix))


def test_grid_to_text():
    assert grid_to_text(matrix_to_grid(SMALL_MATRIX)) == "X . X\n. X .\nX X X"


def test_grid_to_halfblock_odd_rows():
    assert grid_to_halfblock(matrix_to_grid(SMALL_MATRIX)) == "▀▄▀\n▀▀▀"


def test_fill_percentage():
    grid = matrix_to_grid([[True, False], [False, False]])
    assert grid_fill_percentage(grid) == 25.0
