"""
Job Command - Run a mapping job from YAML

Reads source, sink and output from a job file and runs the mapping.
"""

import sys
from pathlib import Path
import click

from sheetmap.core.config import get_settings
from sheetmap.core.config_loader import load_job
from sheetmap.cli.map_command import run_mapping
from sheetmap.utils.logging_setup import setup_logging


@click.command('job')
@click.argument(
    'config_file',
    type=click.Path(path_type=Path)
)
def job_command(config_file):
    """
    Run a mapping job.

    CONFIG_FILE: Path to job YAML file

    \b
    Example job file:
      source: reports.library:build_library
      sink:
        implementation: openpyxl
        config:
          number_format_aliases:
            currency: '"€"#,##0.00'
      output: ./output/library.xlsx

    \b
    Examples:
      python main.py job jobs/library.yaml
    """
    if not config_file.exists():
        click.echo(f"\n✗ Job file not found: {config_file}", err=True)
        if not config_file.is_absolute():
            click.echo(f"  Looking in: {config_file.absolute()}", err=True)
        sys.exit(1)

    try:
        job = load_job(config_file)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"\n✗ Invalid job file: {e}", err=True)
        sys.exit(1)

    settings = get_settings()
    setup_logging(
        log_level=job.log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        component='sheetmap-job-command'
    )

    click.echo(f"Running job: {config_file}")
    sys.exit(run_mapping(job.source, job.output, job.sink.implementation, job.sink.config))
