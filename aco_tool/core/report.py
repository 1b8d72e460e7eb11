"""Palette formatters: GIMP palette text and JSON."""

import json
from typing import Any

from aco_tool.core.types import Palette

DEFAULT_NAME = 'Untitled'
DEFAULT_COLUMNS = 16
NULL_NAME = '(null)'


def format_gpl(
    palette: Palette,
    name: str = DEFAULT_NAME,
    columns: int = DEFAULT_COLUMNS,
    null_name: str = NULL_NAME,
) -> str:
    """Format a palette as a GIMP palette listing.

    Entries without a name render as ``null_name``. The default ``(null)``
    matches what the classic aco2gpl converter printed; pass ``''`` to leave
    the field empty. The returned text has no trailing newline.
    """
    lines = ['GIMP Palette', f'Name: {name}', f'Columns: {columns}', '#']
    for entry in palette.entries:
        label = entry.name if entry.name is not None else null_name
        lines.append(f'{entry.r} {entry.g} {entry.b} {label}')
    return '\n'.join(lines)


def format_json(palette: Palette) -> str:
    """Format a palette as JSON."""
    obj: dict[str, Any] = {
        'version': palette.version,
        'declared_count': palette.declared_count,
        'skipped': list(palette.skipped),
    }
    obj['colors'] = [
        {
            'r': e.r,
            'g': e.g,
            'b': e.b,
            'hex': e.hex,
            'name': e.name,
        }
        for e in palette.entries
    ]
    return json.dumps(obj, indent=2)
