"""Tests for aco_tool.core.palette and the palette types."""

import numpy as np
from aco_tool.core.palette import narrow_channel, palette_to_array
from aco_tool.core.types import ColorEntry, Palette


class TestNarrowChannel:
    def test_full_scale(self) -> None:
        assert narrow_channel(0xFFFF) == 255

    def test_zero(self) -> None:
        assert narrow_channel(0) == 0

    def test_truncates_not_rounds(self) -> None:
        # 0x80FF / 256 = 128.996...
        assert narrow_channel(0x80FF) == 128

    def test_below_one_step(self) -> None:
        assert narrow_channel(0x00FF) == 0


class TestColorEntry:
    def test_hex(self) -> None:
        assert ColorEntry(37, 99, 235).hex == '#2563eb'

    def test_hex_pads(self) -> None:
        assert ColorEntry(0, 1, 15).hex == '#00010f'

    def test_rgb(self) -> None:
        assert ColorEntry(1, 2, 3, 'x').rgb == (1, 2, 3)

    def test_name_defaults_to_none(self) -> None:
        assert ColorEntry(0, 0, 0).name is None


class TestPaletteToArray:
    def test_shape_and_order(self) -> None:
        palette = Palette(version=1, entries=(ColorEntry(1, 2, 3), ColorEntry(4, 5, 6)), declared_count=2)
        arr = palette_to_array(palette)
        assert arr.shape == (2, 3)
        assert arr.dtype == np.uint8
        assert arr.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_empty(self) -> None:
        arr = palette_to_array(Palette(version=1))
        assert arr.shape == (0, 3)
