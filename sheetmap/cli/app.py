"""
sheetmap command line interface.

Commands:
  map - Map one @workbook object to a spreadsheet
  job - Run a mapping job described in YAML
"""

import click

from sheetmap import __version__
from sheetmap.registry import register_all_components
from sheetmap.cli.map_command import map_command
from sheetmap.cli.job_command import job_command


@click.group()
@click.version_option(version=__version__, prog_name='sheetmap')
def cli():
    """
    sheetmap - Map object graphs onto spreadsheet sheets

    Every list field of a @workbook object becomes a sheet, every element a
    row; nested records and lists are flattened into titled columns.

    \b
    Examples:
      # Map to .xlsx
      python main.py map reports.library:build_library -o library.xlsx

      # Run a job file
      python main.py job jobs/library.yaml
    """
    register_all_components()


cli.add_command(map_command)
cli.add_command(job_command)


def main():
    cli()
