"""Shared test fixtures."""

from __future__ import annotations

import pytest

from qrsvg.engine.config import RenderConfig

# 3×3 example: two runs, one single cell, one full row
SMALL_MATRIX = [
    [True, False, True],
    [False, True, False],
    [True, True, True],
]

CHECKER_MATRIX = [[(i + j) % 2 == 0 for j in range(5)] for i in range(5)]

EMPTY_ROW_MATRIX = [
    [False, False, False, False],
    [True, True, True, True],
    [False, True, True, False],
    [True, False, False, True],
]

# Far beyond version 40 capacity at any level
OVERSIZED_VALUE = "x" * 8000

LOGO_HREF = "data:image/png;base64,iVBORw0KGgo="


def fake_generator(matrix):
    """Matrix generator stub that records its calls."""
    calls: list[tuple[str, str]] = []

    def generator(value: str, ecl: str):
        calls.append((value, ecl))
        return matrix

    generator.calls = calls
    return generator


@pytest.fixture
def small_matrix() -> list[list[bool]]:
    return SMALL_MATRIX


@pytest.fixture
def counting_generator():
    return fake_generator(SMALL_MATRIX)


@pytest.fixture
def logo_config() -> RenderConfig:
    return RenderConfig(
        value="https://example.com",
        size=100,
        padding=10,
        logo=LOGO_HREF,
        logo_size=20,
        logo_margin=2,
    )
