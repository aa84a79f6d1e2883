"""Module matrix generation — facade over the qrcode library.

The encoder is treated as an opaque collaborator: text + error-correction
level in, square boolean matrix out. No quiet zone is added; padding is a
render-time concern.
"""

from __future__ import annotations

import logging

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError

from qrsvg.errors import GenerationError

logger = logging.getLogger(__name__)

ECL_LEVELS = {
    "L": ERROR_CORRECT_L,  # ~7% recovery
    "M": ERROR_CORRECT_M,  # ~15%
    "Q": ERROR_CORRECT_Q,  # ~25%
    "H": ERROR_CORRECT_H,  # ~30%
}

Matrix = list[list[bool]]


def generate_matrix(value: str, ecl: str = "M") -> Matrix:
    """Encode ``value`` at level ``ecl`` and return the module matrix.

    Raises:
        GenerationError: unknown level, empty input or capacity exceeded.
    """
    if ecl not in ECL_LEVELS:
        raise GenerationError(f"Unknown error correction level: {ecl!r}")
    if not value:
        raise GenerationError("No input text")

    qr = qrcode.QRCode(
        version=None,  # smallest version that fits
        error_correction=ECL_LEVELS[ecl],
        box_size=1,
        border=0,
    )
    qr.add_data(value)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        logger.warning("Matrix generation failed (ecl=%s, %d chars): %s", ecl, len(value), e)
        raise GenerationError(f"Value does not fit at level {ecl}: {e}") from e

    matrix = [[bool(cell) for cell in row] for row in qr.get_matrix()]
    logger.debug("Generated %d×%d matrix (version %s, ecl=%s)", len(matrix), len(matrix), qr.version, ecl)
    return matrix
