"""JSON dump of the last decoded document.

Includes the format version, the colour count declared in the stream header,
the colorspace tags of skipped non-RGB records, and every RGB colour with its
hex value and name (null when absent).

Example:
    aco-tool json swatches.aco
"""

from aco_tool.core.report import format_json
from aco_tool.core.types import Palette, Writer

writer = Writer(
    name='json',
    help='JSON dump of colours, names and skipped colorspaces.',
)


@writer.render
def render(palette: Palette, args) -> str:
    return format_json(palette)
