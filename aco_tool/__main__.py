"""aco-tool — Convert Photoshop ACO colour swatches to GIMP palettes.

Usage: aco-tool [writer] [input] [options]

Reads one or more concatenated ACO documents from a file or standard input
and writes the last one. With no arguments, reads ACO on stdin and writes
a GIMP palette on stdout.

Writers live in aco_tool/writers/ and are listed in aco_tool.registry.
Each writer module's docstring is its documentation.
Run `aco-tool help <writer>` for full module docs.

Progress messages go to stderr; palette output is the only thing on stdout.
"""

import argparse
import importlib
import os
import sys
from pathlib import Path
from typing import BinaryIO

from aco_tool import registry
from aco_tool.core.aco_parser import AcoFormatError, iter_aco
from aco_tool.core.types import COLORSPACE_NAMES, Palette

DEFAULT_WRITER = 'gpl'

VERSION_LABELS = {
    1: '1 (photoshop < 7.0)',
    2: '2 (photoshop >= 7.0)',
}


def _positive_int(value: str) -> int:
    """argparse type for counts and sizes that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid int value: {value!r}') from None
    if number < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {number}')
    return number


def _load_writer_module(name: str) -> object:
    """Load the raw module for a writer (for docstring access)."""
    return importlib.import_module(f'aco_tool.writers.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_writer_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    writers = registry.all_writers()

    epilog = (
        'Examples:\n'
        '  aco-tool < swatches.aco > swatches.gpl\n'
        '  aco-tool gpl swatches.aco -o swatches.gpl --name "Brand colours"\n'
        '  aco-tool gpl swatches.aco --empty-names\n'
        '  aco-tool json swatches.aco\n'
        '  aco-tool png swatches.aco -o preview.png --columns 8 --swatch-size 32\n'
        '  aco-tool help png\n'
    )
    parser = argparse.ArgumentParser(
        prog='aco-tool',
        description='Convert Photoshop ACO colour swatches to GIMP palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='writer', help=f'Output writer (default: {DEFAULT_WRITER})')

    # Auto-register each writer as a subcommand using module docstring
    for name, w in sorted(writers.items()):
        p = sub.add_parser(name, help=_short_doc(name, w.help))
        p.add_argument('input', nargs='?', default='-', help='ACO file to read (default: - for stdin)')
        p.add_argument('-o', '--output', help='Write to this file instead of stdout')
        p.add_argument('-n', '--name', default=None, help='Palette name in the GPL header (default: Untitled)')
        p.add_argument(
            '-c',
            '--columns',
            type=_positive_int,
            default=None,
            metavar='N',
            help='Columns hint / swatches per row (at least 1)',
        )
        p.add_argument('--empty-names', action='store_true', help='Leave unnamed colours blank instead of (null)')
        p.add_argument(
            '-s',
            '--swatch-size',
            type=_positive_int,
            default=None,
            metavar='PX',
            help='Swatch size for png (at least 1)',
        )
        p.add_argument('-q', '--quiet', action='store_true', help='Suppress progress messages on stderr')
        p.add_argument('--strict', action='store_true', help='Exit 1 if the input holds no ACO data')

    # `help` subcommand — prints full module docstring for a writer
    help_parser = sub.add_parser('help', help='Print full docs for a writer')
    help_parser.add_argument('command', nargs='?', help='Writer name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a writer."""
    writers = registry.all_writers()

    if command is None:
        print('Available writers:\n')
        for name, w in sorted(writers.items()):
            print(f'  {name:<8} {_short_doc(name, w.help)}')
        print('\nRun: aco-tool help <writer> for full docs.')
        return

    if command not in writers:
        print(f'Unknown writer: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(writers))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_writer_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _progress(args: argparse.Namespace, message: str) -> None:
    if not args.quiet:
        print(message, file=sys.stderr)


def _describe(palette: Palette, args: argparse.Namespace) -> None:
    """Report one decoded document on stderr."""
    _progress(args, f'reading ACO stream version: {VERSION_LABELS[palette.version]}')
    _progress(args, f'{palette.declared_count} colors in this file')
    for tag in palette.skipped:
        label = COLORSPACE_NAMES.get(tag, 'unknown')
        _progress(args, f'Non RGB color (colorspace {tag}: {label}) skipped')


def _read_last(stream: BinaryIO, args: argparse.Namespace) -> Palette | None:
    """Decode every document in the stream, keep the last one."""
    last = None
    for palette in iter_aco(stream):
        _describe(palette, args)
        last = palette
    return last


def _load_palette(args: argparse.Namespace) -> Palette | None:
    """Read the input, exiting with status 1 on a fatal decode error."""
    try:
        if args.input == '-':
            return _read_last(sys.stdin.buffer, args)
        if not os.path.isfile(args.input):
            print(f'Error: input not found: {args.input}', file=sys.stderr)
            sys.exit(1)
        with open(args.input, 'rb') as f:
            return _read_last(f, args)
    except AcoFormatError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


def _write_output(data: str | bytes, args: argparse.Namespace) -> None:
    if isinstance(data, str):
        data += '\n'
    if args.output:
        path = Path(args.output)
        if isinstance(data, bytes):
            path.write_bytes(data)
        else:
            path.write_text(data, encoding='utf-8')
        return
    if isinstance(data, bytes):
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        sys.stdout.write(data)


def _normalise_argv(argv: list[str]) -> list[str]:
    """Insert the default writer when the first argument is not a subcommand."""
    commands = set(registry.all_writers()) | {'help'}
    if argv and (argv[0] in commands or argv[0] in ('-h', '--help')):
        return argv
    return [DEFAULT_WRITER, *argv]


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(_normalise_argv(list(sys.argv[1:] if argv is None else argv)))

    # Handle `help` subcommand
    if args.writer == 'help':
        _print_help(getattr(args, 'command', None))
        return

    writer = registry.get(args.writer)
    palette = _load_palette(args)

    _progress(args, f'Generating {writer.name.upper()}...')
    if palette is None:
        print('No data!', file=sys.stderr)
        if args.strict:
            sys.exit(1)
    else:
        _write_output(writer.execute(palette, args), args)
    _progress(args, 'Done.')


if __name__ == '__main__':
    main()
