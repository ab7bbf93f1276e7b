"""
Configuration data models for bsearch.

This module defines the settings that shape how searches run when they go
through a ``BoundarySearcher`` (sortedness checking, search tracing) and how the
package logger is configured.
"""

from typing import Dict, List, Any
import logging
from pydantic import BaseModel, Field, field_validator


PACKAGE_LOGGER = "bsearch"

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class SearchConfig(BaseModel):
    """
    Configuration for boundary searches.

    Attributes:
        check_sorted: Verify sortedness before each search (O(n), debug only)
        trace_searches: Emit a DEBUG log record for every search
    """

    check_sorted: bool = Field(False, description="Verify sortedness before each search")
    trace_searches: bool = Field(False, description="Log every search at DEBUG level")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class LoggingConfig(BaseModel):
    """
    Configuration for the package logger.

    Attributes:
        level: Level name applied to the ``bsearch`` logger
    """

    level: str = Field("WARNING", description="Level applied to the bsearch logger")

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate and normalize the level name."""
        if not isinstance(v, str):
            raise ValueError(f"Logging level must be a string, got {type(v).__name__}")
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid logging level: {v}. Valid levels: {LOG_LEVELS}")
        return level

    def get_level_number(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelName(self.level)

    def apply(self) -> logging.Logger:
        """Set the configured level on the package logger and return it."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self.get_level_number())
        return package_logger

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class BsearchConfig(BaseModel):
    """
    Main configuration model for bsearch.

    Attributes:
        search: Search behaviour settings
        logging: Package logger settings
    """

    search: SearchConfig = Field(default_factory=SearchConfig, description="Search behaviour settings")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Package logger settings")

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for settings that are valid but probably unintended.

        Returns:
            List of warning messages (empty if nothing looks off)
        """
        warnings = []

        if self.search.check_sorted:
            warnings.append("Sortedness checking is enabled: every search performs an O(n) scan")

        if self.search.trace_searches and self.logging.get_level_number() > logging.DEBUG:
            warnings.append(
                f"trace_searches has no effect at logging level {self.logging.level}; use DEBUG"
            )

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'search': self.search.to_dict(),
            'logging': self.logging.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BsearchConfig':
        """Create BsearchConfig from dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of the configuration."""
        return (
            f"BsearchConfig(check_sorted={self.search.check_sorted}, "
            f"trace_searches={self.search.trace_searches}, "
            f"log_level={self.logging.level})"
        )


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the shape of a raw configuration dictionary.

    Unknown sections and unknown keys inside a section are rejected so that a
    misspelled setting does not silently fall back to its default.

    Args:
        config_data: Raw configuration data

    Returns:
        Validated data with empty sections removed

    Raises:
        ValueError: If the data has an unexpected shape
    """
    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config_data).__name__}")

    sections = {
        'search': SearchConfig,
        'logging': LoggingConfig
    }

    validated = {}
    for section_name, section_data in config_data.items():
        if section_name not in sections:
            raise ValueError(f"Unknown configuration section: {section_name}")

        # An empty YAML section means "use the defaults"
        if section_data is None:
            continue

        if not isinstance(section_data, dict):
            raise ValueError(f"Section '{section_name}' must be a mapping")

        known_keys = set(sections[section_name].model_fields)
        for key in section_data:
            if key not in known_keys:
                raise ValueError(f"Unknown key '{key}' in section '{section_name}'")

        validated[section_name] = section_data

    return validated
