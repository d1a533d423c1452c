# recordtable/src/recordtable/core/config.py
"""
Configuration management for recordtable.
"""

import os
import yaml
from pathlib import Path
from typing import List
from dataclasses import dataclass, asdict, fields

from .exceptions import ConfigError


OUTPUT_FORMATS = ["table", "csv"]


@dataclass
class TableConfig:
    """Rendering and CLI settings."""

    # Text table settings
    column_separator: str = " | "
    underline_char: str = "="

    # CSV settings
    csv_delimiter: str = ","
    csv_quotechar: str = '"'
    csv_lineterminator: str = "\n"

    # CLI settings
    default_output_format: str = "table"
    color_output: bool = True
    debug_mode: bool = False
    verbose_logging: bool = False

    @classmethod
    def load_from_file(cls, config_path: Path) -> 'TableConfig':
        """Load configuration from YAML file."""
        if not config_path.exists():
            return cls()  # Return default config

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {e}", str(config_path))
        except OSError as e:
            raise ConfigError(f"Failed to load config: {e}", str(config_path))

        if not isinstance(data, dict):
            raise ConfigError("Top level must be a mapping", str(config_path))

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}", str(config_path))

        for f in fields(cls):
            if f.name in data and type(data[f.name]) is not type(f.default):
                raise ConfigError(
                    f"{f.name} must be of type {type(f.default).__name__}", str(config_path)
                )

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=True)

        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}", str(config_path))

    def merge_with_args(self, **kwargs) -> 'TableConfig':
        """Create new config by merging with command line arguments."""
        # Only merge non-None values
        updates = {k: v for k, v in kwargs.items() if v is not None}

        config_dict = asdict(self)
        config_dict.update(updates)

        return TableConfig(**config_dict)

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory."""
        return Path.home() / ".recordtable"

    @property
    def default_config_path(self) -> Path:
        """Get the default configuration file path."""
        return self.config_dir / "config.yaml"

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if len(self.underline_char) != 1:
            issues.append("underline_char must be a single character")

        if len(self.csv_delimiter) != 1:
            issues.append("csv_delimiter must be a single character")

        if len(self.csv_quotechar) != 1:
            issues.append("csv_quotechar must be a single character")
        elif self.csv_quotechar == self.csv_delimiter:
            issues.append("csv_quotechar must differ from csv_delimiter")

        if not self.csv_lineterminator:
            issues.append("csv_lineterminator cannot be empty")

        if self.default_output_format not in OUTPUT_FORMATS:
            issues.append(f"Invalid output format: {self.default_output_format}")

        return issues


def load_config() -> TableConfig:
    """Load configuration from default locations."""
    config = TableConfig()

    default_path = config.default_config_path
    if default_path.exists():
        config = TableConfig.load_from_file(default_path)

    # Override with environment variables
    env_overrides = {}

    if 'RECORDTABLE_FORMAT' in os.environ:
        env_overrides['default_output_format'] = os.environ['RECORDTABLE_FORMAT']

    if 'RECORDTABLE_CSV_DELIMITER' in os.environ:
        env_overrides['csv_delimiter'] = os.environ['RECORDTABLE_CSV_DELIMITER']

    if 'RECORDTABLE_DEBUG' in os.environ:
        env_overrides['debug_mode'] = os.environ['RECORDTABLE_DEBUG'].lower() in ('1', 'true', 'yes')

    if 'RECORDTABLE_NO_COLOR' in os.environ:
        env_overrides['color_output'] = False

    if env_overrides:
        config = config.merge_with_args(**env_overrides)

    return config
