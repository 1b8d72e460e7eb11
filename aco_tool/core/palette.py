"""Colour helpers: 16-bit channel narrowing, numpy palette views."""

import numpy as np

from aco_tool.core.types import Palette


def narrow_channel(word: int) -> int:
    """Narrow a 16-bit channel to 8 bits by truncating division (no rounding)."""
    return word // 256


def palette_to_array(palette: Palette) -> np.ndarray:
    """Return the palette colours as an (N, 3) uint8 array in entry order."""
    if not palette.entries:
        return np.zeros((0, 3), dtype=np.uint8)
    return np.array([e.rgb for e in palette.entries], dtype=np.uint8)
