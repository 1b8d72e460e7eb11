"""GIMP palette (.gpl) text listing — the default writer.

Writes the fixed GPL header (palette marker, name, column hint) followed by
one "R G B NAME" row per RGB colour of the last decoded document.

Unnamed colours (every colour of a version 1 file) print as "(null)", as the
classic aco2gpl converter did. Use --empty-names to leave the field blank.

Example:
    aco-tool gpl swatches.aco -o swatches.gpl
    aco-tool < swatches.aco > swatches.gpl
"""

from aco_tool.core.report import DEFAULT_COLUMNS, DEFAULT_NAME, NULL_NAME, format_gpl
from aco_tool.core.types import Palette, Writer, option

writer = Writer(
    name='gpl',
    help='GIMP palette text listing (default).',
)


@writer.render
def render(palette: Palette, args) -> str:
    return format_gpl(
        palette,
        name=getattr(args, 'name', None) or DEFAULT_NAME,
        columns=option(args, 'columns', DEFAULT_COLUMNS),
        null_name='' if getattr(args, 'empty_names', False) else NULL_NAME,
    )
