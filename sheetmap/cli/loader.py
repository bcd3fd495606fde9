"""
Loading of root objects named as 'package.module:attribute'.
"""
import importlib
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_root(source: str) -> Any:
    """
    Import the object named by source; call it if it is callable.

    Args:
        source: 'package.module:attribute' (attribute may be dotted)

    Returns:
        The root object to map

    Raises:
        ValueError: If source is malformed or cannot be imported
    """
    module_name, sep, attribute = source.partition(':')
    if not sep or not module_name or not attribute:
        raise ValueError(f"Invalid source '{source}', expected 'module:attribute'")

    # Modules next to the working directory are importable like with `python -m`
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}': {e}") from e

    for part in attribute.split('.'):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"'{module_name}' has no attribute '{attribute}'") from e

    if callable(target):
        logger.debug(f"Calling {source} to build the root object")
        target = target()

    return target
