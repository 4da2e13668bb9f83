"""Draw solved boards as images with OpenCV."""

import logging
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from .solver import SIZE, BOX

log = logging.getLogger(__name__)

BACKGROUND = (30, 30, 30)
GRID_COLOR = (80, 80, 80)
GIVEN_COLOR = (255, 255, 255)
SOLVED_COLOR = (0, 200, 0)


def render_board(solved: np.ndarray, original: Optional[np.ndarray] = None,
                 size: int = 450) -> np.ndarray:
    """
    Draw the board on a square BGR canvas.

    Given digits (non-zero in `original`) are drawn in white, solved digits
    in green. Without `original` every digit counts as given.
    """
    if original is None:
        original = solved

    canvas = np.full((size, size, 3), BACKGROUND, dtype=np.uint8)
    cell = size // SIZE
    font = cv2.FONT_HERSHEY_SIMPLEX

    for i in range(SIZE + 1):
        thickness = 3 if i % BOX == 0 else 1
        pos = min(i * cell, size - 1)
        cv2.line(canvas, (0, pos), (size, pos), GRID_COLOR, thickness)
        cv2.line(canvas, (pos, 0), (pos, size), GRID_COLOR, thickness)

    for r in range(SIZE):
        for c in range(SIZE):
            val = int(solved[r, c])
            if val == 0:
                continue
            color = GIVEN_COLOR if original[r, c] != 0 else SOLVED_COLOR
            text = str(val)
            text_size, _ = cv2.getTextSize(text, font, 0.9, 2)
            x = c * cell + (cell - text_size[0]) // 2
            y = r * cell + (cell + text_size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, 0.9, color, 2, cv2.LINE_AA)

    return canvas


def save_board_image(path: Union[str, Path], solved: np.ndarray,
                     original: Optional[np.ndarray] = None, size: int = 450) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image = render_board(solved, original, size)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"Could not write image to {path}")
    log.debug("Saved board image to %s", path)
    return path
