"""
Map Command - Map one root object to a workbook

Imports a @workbook object (or a factory returning one) and writes it with
the chosen sink.
"""

import sys
from pathlib import Path
import click

from sheetmap.core.config import get_settings
from sheetmap.core.errors import SheetmapError
from sheetmap.cli.loader import load_root
from sheetmap.mapper import Sheetmap
from sheetmap.registry import registry
from sheetmap.utils.logging_setup import setup_logging


def run_mapping(source: str, output: Path, sink_name: str, sink_config: dict) -> int:
    """
    Load, map and write one root object, reporting through click.

    Returns:
        Exit code (0 success, 1 usage/configuration error, 3 unexpected error)
    """
    try:
        sink = registry.create_sink(sink_name, sink_config)
        root = load_root(source)
        mapper = Sheetmap.using(sink).map(root)
        written = mapper.write(output)
    except (ValueError, SheetmapError) as e:
        click.echo(f"\n✗ Error: {e}", err=True)
        return 1
    except Exception as e:
        click.echo(f"\n✗ Unexpected error: {e}", err=True)
        return 3

    click.echo(f"\n✓ Mapping complete!")
    click.echo(f"  Source: {source}")
    click.echo(f"  Output: {written}")
    for spec in mapper.sheets:
        click.echo(f"  - {spec.name}: {len(spec.rows)} rows x {spec.width} columns")
    return 0


@click.command('map')
@click.argument('source')
@click.option(
    '--output', '-o',
    type=click.Path(path_type=Path),
    help='Output file (default: <OUTPUT_DIR>/workbook.xlsx, or .json for the memory sink)'
)
@click.option(
    '--sink', '-s',
    'sink_name',
    type=click.Choice(['openpyxl', 'memory']),
    help='Sink implementation (default: SHEETMAP_DEFAULT_SINK)'
)
@click.option(
    '--number-format', '-f',
    'number_formats',
    multiple=True,
    metavar='TAG=CODE',
    help='Number format alias, e.g. -f currency=\'"€"#,##0.00\' (repeatable)'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Console log level (default: SHEETMAP_LOG_LEVEL)'
)
def map_command(source, output, sink_name, number_formats, log_level):
    """
    Map a @workbook object to a spreadsheet.

    SOURCE: 'package.module:attribute'. If the attribute is callable it is
    called without arguments and its result is mapped.

    \b
    Examples:
      # Write an .xlsx workbook
      python main.py map reports.library:build_library -o library.xlsx

      # Preview the grids as JSON
      python main.py map reports.library:build_library --sink memory -o library.json
    """
    settings = get_settings()
    setup_logging(
        log_level=log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        component='sheetmap-map-command'
    )

    sink_name = sink_name or settings.DEFAULT_SINK
    if output is None:
        suffix = '.json' if sink_name == 'memory' else '.xlsx'
        output = settings.OUTPUT_DIR / f'workbook{suffix}'

    aliases = {}
    for item in number_formats:
        tag, sep, code = item.partition('=')
        if not sep or not tag:
            click.echo(f"\n✗ Error: invalid number format '{item}', expected TAG=CODE", err=True)
            sys.exit(1)
        aliases[tag] = code

    sink_config = {'number_format_aliases': aliases} if aliases else {}
    sys.exit(run_mapping(source, output, sink_name, sink_config))
