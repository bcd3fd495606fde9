"""
Logging for the sheetmap command line.

The console gets coloured level names at the requested level, the log file
gets everything at DEBUG. Library code only uses module loggers and never
configures handlers itself.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

CONSOLE_FORMAT = '[%(asctime)s] %(levelname)s | %(name)-12s | %(message)s'
FILE_FORMAT = '[%(asctime)s] %(levelname)-8s | %(name)-12s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers that are noisy at DEBUG
QUIET_LOGGERS = ('openpyxl',)


class ColourFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    RESET = '\033[0m'
    LEVEL_COLOURS = {
        logging.DEBUG: '\033[36m',     # cyan
        logging.INFO: '\033[32m',      # green
        logging.WARNING: '\033[33m',   # yellow
        logging.ERROR: '\033[31m',     # red
        logging.CRITICAL: '\033[35m',  # magenta
    }

    def format(self, record):
        colour = self.LEVEL_COLOURS.get(record.levelno)
        if colour is None:
            return super().format(record)

        # Other handlers share the record, so colour a copy
        coloured = logging.makeLogRecord(record.__dict__)
        coloured.levelname = f"{colour}{record.levelname:<8}{self.RESET}"
        return super().format(coloured)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColourFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_dir: Path, component: str) -> logging.FileHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

    handler = logging.FileHandler(log_dir / f'{component}_{timestamp}.log', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    log_level: str = 'INFO',
    log_dir: Optional[Union[str, Path]] = None,
    component: str = 'sheetmap',
) -> logging.Logger:
    """
    Configure the root logger for a CLI run.

    Existing root handlers are closed and replaced.

    Args:
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file (None = ./logs, '' = no file)
        component: Prefix of the log file name

    Returns:
        The root logger
    """
    level_name = log_level.upper()

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.addHandler(_console_handler(getattr(logging, level_name)))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_dir == '':
        root.info(f"Logging initialised (level: {level_name}, no log file)")
        return root

    file_handler = _file_handler(Path('./logs') if log_dir is None else Path(log_dir), component)
    root.addHandler(file_handler)
    root.info(f"Logging initialised (level: {level_name}, file: {file_handler.baseFilename})")
    return root
