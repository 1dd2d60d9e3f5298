"""
Settings for the responder service, optionally loaded from a YAML file.

Example config.yml:
    host: 127.0.0.1
    port: 4567
    log_level: INFO
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tintlog.config import parse_level
from tintlog.exceptions import ConfigError


class ResponderSettings(BaseModel):
    host: str = '0.0.0.0'
    port: int = Field(default=4567, ge=1, le=65535)
    log_level: str = 'DEBUG'

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        try:
            parse_level(value)
        except ConfigError as e:
            raise ValueError(str(e))
        return value.upper()

    @property
    def level(self) -> int:
        return parse_level(self.log_level)


def load_settings(config_path: Optional[str] = None) -> ResponderSettings:
    """
    Load responder settings

    Args:
        config_path: Path to a YAML file, or None for defaults

    Returns:
        ResponderSettings: Validated settings

    Raises:
        ConfigError: If the file is missing, not YAML, or fails validation
    """
    if config_path is None:
        return ResponderSettings()

    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {Path(config_path).name}")

    try:
        return ResponderSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}")
