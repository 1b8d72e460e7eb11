"""Swatch grid preview image (PNG).

Lays the colours out left to right, --columns per row (default 16), each a
square of --swatch-size pixels (default 16). The last row is padded with
black. An empty palette renders as a single black swatch.

PNG bytes go to stdout unless -o is given.

Example:
    aco-tool png swatches.aco -o preview.png --columns 8 --swatch-size 32
"""

import io

import numpy as np
from PIL import Image

from aco_tool.core.palette import palette_to_array
from aco_tool.core.report import DEFAULT_COLUMNS
from aco_tool.core.types import Palette, Writer, option

writer = Writer(
    name='png',
    help='Swatch grid preview image (PNG).',
    binary=True,
)

DEFAULT_SWATCH_SIZE = 16


def render_swatches(palette: Palette, columns: int = DEFAULT_COLUMNS, size: int = DEFAULT_SWATCH_SIZE) -> Image.Image:
    """Build the swatch grid as an RGB image."""
    if columns < 1 or size < 1:
        raise ValueError(f'columns and size must be at least 1, got columns={columns} size={size}')
    colours = palette_to_array(palette)
    count = len(colours)
    cols = max(1, min(count, columns))
    rows = max(1, -(-count // cols))

    grid = np.zeros((rows * cols, 3), dtype=np.uint8)
    grid[:count] = colours
    grid = grid.reshape(rows, cols, 3)
    # Scale each cell up to a size x size block
    grid = np.repeat(np.repeat(grid, size, axis=0), size, axis=1)
    return Image.fromarray(grid)


@writer.render
def render(palette: Palette, args) -> bytes:
    image = render_swatches(
        palette,
        columns=option(args, 'columns', DEFAULT_COLUMNS),
        size=option(args, 'swatch_size', DEFAULT_SWATCH_SIZE),
    )
    buf = io.BytesIO()
    image.save(buf, format='PNG')
    return buf.getvalue()
