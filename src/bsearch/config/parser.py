"""
YAML configuration for bsearch.

The configuration file is optional and small: a ``search`` section read by
``BoundarySearcher`` and a ``logging`` section for the package logger. Every
read, parse or validation failure surfaces as a ``ConfigurationError``.
"""

import yaml
from pathlib import Path
from typing import Any, List, Optional, Union
import logging
from dataclasses import dataclass
from pydantic import ValidationError

from ..models.config import BsearchConfig, validate_config_dict


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Outcome of loading a configuration.

    Attributes:
        config: Validated configuration
        warnings: Settings that are valid but probably unintended
        config_path: File the configuration came from, None for defaults
        is_default: Whether no file was found
    """
    config: BsearchConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read, parsed or validated."""
    pass


class ConfigParser:
    """Reads and writes ``bsearch.yaml`` files."""

    CONFIG_NAMES = ['.bsearch.yaml', 'bsearch.yaml']

    def __init__(self, strict_mode: bool = False):
        """
        Args:
            strict_mode: Raise on configuration warnings instead of returning them
        """
        self.strict_mode = strict_mode

    def search_paths(self) -> List[Path]:
        """Candidate files, in lookup order."""
        directories = [Path.cwd(), Path.home(), Path.home() / '.config' / 'bsearch']
        return [directory / name for directory in directories for name in self.CONFIG_NAMES]

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load a configuration file, or the first one found in the search paths.

        Args:
            config_path: Explicit file to load; must exist when given

        Returns:
            ConfigParseResult for the file, or for the defaults if nothing was found

        Raises:
            ConfigurationError: If the file is missing, malformed or invalid, or if
                strict mode is on and the configuration has warnings
        """
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.is_file():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
        else:
            config_path = next((path for path in self.search_paths() if path.is_file()), None)

        if config_path is None:
            logger.info("No configuration file found, using defaults")
            config = BsearchConfig()
            warnings = ["No configuration file found, using default settings"]
        else:
            config = self.parse(self._read(config_path))
            warnings = config.validate_configuration()
            logger.info(f"Loaded configuration from {config_path}")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        return ConfigParseResult(
            config=config,
            warnings=warnings,
            config_path=config_path,
            is_default=config_path is None
        )

    def parse(self, data: Any) -> BsearchConfig:
        """
        Validate raw YAML data into a configuration.

        Raises:
            ConfigurationError: If the data does not describe a valid configuration
        """
        try:
            return BsearchConfig.from_dict(validate_config_dict(data))
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _read(self, path: Path) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        # Empty or comment-only file
        return {} if data is None else data

    def save_config(self, config: BsearchConfig, output_path: Union[str, Path]) -> None:
        """
        Write a configuration as YAML, creating parent directories.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write("# bsearch configuration (check_sorted costs O(n) per search)\n")
                yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e

        logger.info(f"Configuration saved to {output_path}")


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Load configuration with a fresh ``ConfigParser``. See ``ConfigParser.load_config``."""
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> List[str]:
    """
    Check a configuration file without using it.

    Returns:
        Error messages; empty if the file loads cleanly
    """
    try:
        ConfigParser().load_config(config_path)
    except ConfigurationError as e:
        return [str(e)]
    return []


def create_config_template(output_path: Union[str, Path]) -> None:
    """Write the default configuration to ``output_path`` as a starting point."""
    ConfigParser().save_config(BsearchConfig(), output_path)
