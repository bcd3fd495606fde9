"""
Sheetmap - Job Configuration Loader

Loads and validates YAML job files.

YAML STRUCTURE:
    source: myapp.reports:build_library     # module:attribute, called if callable
    sink:
      implementation: openpyxl              # or 'memory'
      config:
        number_format_aliases:
          currency: '"€"#,##0.00'
    output: ./output/library.xlsx

    String values anywhere under sink.config may reference environment
    variables as ${ENV_VAR}.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


@dataclass
class ComponentConfig:
    """Generic component configuration"""
    implementation: str
    config: dict = field(default_factory=dict)

    def __post_init__(self):
        """Resolve environment variables in config"""
        self.config = _resolve_env_vars(self.config)


@dataclass
class JobConfig:
    """A single mapping job"""
    source: str
    sink: ComponentConfig
    output: Path
    log_level: Optional[str] = None


def _resolve_env_vars(value: Any) -> Any:
    """Resolve ${ENV_VAR} references, recursing into dicts and lists"""
    if isinstance(value, dict):
        return {key: _resolve_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(item) for item in value]
    if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
        env_var = value[2:-1]
        resolved = os.getenv(env_var)
        if not resolved:
            raise ValueError(f"Environment variable {env_var} not set")
        return resolved
    return value


def load_job(config_path: Path) -> JobConfig:
    """
    Load a mapping job from a YAML file.

    Args:
        config_path: Path to YAML job file

    Returns:
        JobConfig object

    Raises:
        FileNotFoundError: If config file not found
        ValueError: If config is invalid
    """
    # Load .env file if it exists
    load_dotenv()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Job file not found: {config_path}")

    with open(config_path, encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Job file {config_path} must contain a mapping")

    # Validate required sections
    required = ['source', 'sink']
    for section in required:
        if section not in data:
            raise ValueError(f"Missing required section '{section}' in job file")

    sink_data = data['sink']
    if isinstance(sink_data, str):
        sink_data = {'implementation': sink_data}

    try:
        job = JobConfig(
            source=str(data['source']),
            sink=ComponentConfig(
                implementation=sink_data['implementation'],
                config=sink_data.get('config') or {}
            ),
            output=Path(data.get('output', './output/workbook.xlsx')),
            log_level=data.get('log_level')
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid job structure: missing {e}")

    if ':' not in job.source:
        raise ValueError(f"Invalid source '{job.source}', expected 'module:attribute'")

    return job
