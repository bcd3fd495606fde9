#!/usr/bin/env python3
"""
sheetmap - Main Entry Point

Map annotated object graphs onto spreadsheet sheets.

Commands:
  map - Map one @workbook object to a spreadsheet
  job - Run a mapping job described in YAML

Usage:
  python main.py map reports.library:build_library -o library.xlsx
  python main.py map reports.library:build_library --sink memory -o library.json
  python main.py job jobs/library.yaml
"""

from sheetmap.cli.app import cli


if __name__ == '__main__':
    cli()
