"""
Configuration management for recipelab.

Loads and validates the optional recipelab.yaml configuration file:

    output_dir: build
    outputs:
      recipe: test.recipe
      inline_script: my_app.py
      library: my_library.py
      driver: my_app_2.py
    logging:
      level: INFO
      format: pretty        # or structured
      console: true
      file: logs/recipelab.log
    recipe: recipes/demo.yaml
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from recipelab.errors import ConfigError

# Default configuration file, looked up in the working directory
DEFAULT_CONFIG_FILE = "recipelab.yaml"

DEFAULT_OUTPUTS = {
    "recipe": "test.recipe",
    "inline_script": "my_app.py",
    "library": "my_library.py",
    "driver": "my_app_2.py",
}

LOG_FORMATS = ("pretty", "structured")


class LabConfig:
    """Complete recipelab configuration."""

    def __init__(self, raw_config: Optional[Dict[str, Any]] = None, config_path: Optional[Path] = None):
        self.config_path = config_path
        self.raw_config = raw_config or {}

        if not isinstance(self.raw_config, dict):
            raise ConfigError("Configuration must be a mapping")

        self.output_dir = Path(self.raw_config.get("output_dir", "."))

        outputs = self.raw_config.get("outputs", {}) or {}
        if not isinstance(outputs, dict):
            raise ConfigError("'outputs' must be a mapping")
        unknown = set(outputs) - set(DEFAULT_OUTPUTS)
        if unknown:
            raise ConfigError(f"Unknown outputs: {sorted(unknown)}")
        self.outputs: Dict[str, str] = {**DEFAULT_OUTPUTS, **outputs}

        self.logging = self.raw_config.get("logging", {}) or {}
        if not isinstance(self.logging, dict):
            raise ConfigError("'logging' must be a mapping")

        recipe = self.raw_config.get("recipe")
        self.recipe_path = Path(recipe) if recipe else None

    @classmethod
    def from_file(cls, config_path: Path) -> "LabConfig":
        """Load configuration from a YAML file."""
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {e}")

        return cls(config or {}, config_path=config_path)

    def output_path(self, name: str) -> Path:
        """Get the path of a generated artifact (recipe, inline_script, library, driver)."""
        if name not in self.outputs:
            raise ConfigError(f"Unknown output: {name}")
        return self.output_dir / self.outputs[name]

    def get_log_level(self) -> str:
        """Get logging level."""
        return str(self.logging.get("level", "INFO")).upper()

    def get_log_format(self) -> str:
        """Get log format (structured or pretty)."""
        return self.logging.get("format", "pretty")

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path, if file logging is enabled."""
        log_file = self.logging.get("file")
        return Path(log_file) if log_file else None

    def should_log_to_console(self) -> bool:
        """Check if console logging is enabled."""
        return bool(self.logging.get("console", True))

    def validate_logging(self) -> None:
        """Validate the logging section (level and format)."""
        level = self.get_log_level()
        if not isinstance(getattr(logging, level, None), int):
            raise ConfigError(f"Invalid log level: {level}")

        if self.get_log_format() not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log format: {self.get_log_format()} (expected one of {LOG_FORMATS})"
            )

    def validate(self) -> None:
        """Validate entire configuration."""
        self.validate_logging()

        if not self.output_dir.resolve().parent.exists():
            raise ConfigError(f"output_dir parent does not exist: {self.output_dir.parent}")

        if self.recipe_path is not None and not self.recipe_path.exists():
            raise ConfigError(f"Recipe definition not found: {self.recipe_path}")

    def __repr__(self) -> str:
        return f"LabConfig(output_dir={self.output_dir}, recipe={self.recipe_path})"


def load_config(config_path: Optional[Path] = None) -> LabConfig:
    """
    Load recipelab configuration.

    Args:
        config_path: Path to config file. Defaults to ./recipelab.yaml;
            built-in defaults are used when that file does not exist.

    Returns:
        LabConfig instance

    Raises:
        ConfigError: If config is invalid, or an explicit path is missing
    """
    if config_path is None:
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default_path.exists():
            return LabConfig()
        config_path = default_path

    return LabConfig.from_file(Path(config_path))
