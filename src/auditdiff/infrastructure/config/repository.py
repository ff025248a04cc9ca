"""
Configuration repository for loading and saving the auditor config.

Handles file I/O and turns parse/validation failures into
ConfigurationError.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from auditdiff.domain.config import AuditorConfig
from auditdiff.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

AUDITOR_CONFIG_NAME = "auditor_config"

_LINE_COMMENT = re.compile(r'^\s*//.*$', re.MULTILINE)


def _strip_comments(jsonc_content: str) -> str:
    """Strip whole-line // comments from JSONC content."""
    return _LINE_COMMENT.sub("", jsonc_content)


class ConfigRepository:
    """
    Repository for configuration file operations.

    Looks for ``<name>.json`` first, then ``<name>.jsonc``.
    """

    def __init__(self, config_dir: Path):
        """
        Initialize the config repository.

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir)

    def load_json_file(self, filename: str) -> Dict[str, Any]:
        """
        Load a JSON or JSONC file.

        Args:
            filename: Name of the file to load (without extension)

        Returns:
            Parsed JSON data as dictionary

        Raises:
            ConfigurationError: If file doesn't exist or cannot be parsed
        """
        json_path = self.config_dir / f"{filename}.json"
        jsonc_path = self.config_dir / f"{filename}.jsonc"

        if json_path.exists():
            path, content = json_path, json_path.read_text(encoding="utf-8")
        elif jsonc_path.exists():
            path, content = jsonc_path, _strip_comments(jsonc_path.read_text(encoding="utf-8"))
        else:
            raise ConfigurationError(f"Configuration file not found: {json_path}")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}")
        logger.debug("Loaded configuration from %s", path)
        return data

    def load_auditor_config(self, filename: str = AUDITOR_CONFIG_NAME) -> AuditorConfig:
        """
        Load and validate the auditor configuration.

        Returns:
            Validated AuditorConfig

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        data = self.load_json_file(filename)
        try:
            return AuditorConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid auditor configuration: {e}") from e

    def load_or_default(self, filename: str = AUDITOR_CONFIG_NAME) -> AuditorConfig:
        """Load the auditor configuration, or defaults when no file exists."""
        json_path = self.config_dir / f"{filename}.json"
        jsonc_path = self.config_dir / f"{filename}.jsonc"
        if not json_path.exists() and not jsonc_path.exists():
            logger.info("No %s in %s, using defaults", filename, self.config_dir)
            return AuditorConfig()
        return self.load_auditor_config(filename)

    def save_auditor_config(
        self, config: AuditorConfig, filename: str = AUDITOR_CONFIG_NAME
    ) -> Path:
        """
        Save the auditor configuration as JSON.

        Returns:
            Path of the written file
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.config_dir / f"{filename}.json"
        path.write_text(
            json.dumps(config.model_dump(by_alias=True, exclude_none=True), indent=2),
            encoding="utf-8",
        )
        logger.info("Saved auditor configuration to %s", path)
        return path
