"""
Configuration file parser for transitroute
Handles YAML and JSON settings files with validation
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigFormat, DirectionsSettings


class ConfigParserError(Exception):
    """Configuration parsing error"""
    pass


class ConfigParser:
    """Parser for transitroute settings files"""

    @staticmethod
    def detect_format(file_path: Path) -> ConfigFormat:
        """Detect configuration file format from extension"""
        suffix = file_path.suffix.lower()

        if suffix in ['.yaml', '.yml']:
            return ConfigFormat.YAML
        elif suffix == '.json':
            return ConfigFormat.JSON
        else:
            raise ConfigParserError(f"Unsupported file format: {suffix}")

    @staticmethod
    def load_file(file_path: Path) -> Dict[str, Any]:
        """Load configuration file content"""
        if not file_path.exists():
            raise ConfigParserError(f"Configuration file not found: {file_path}")

        format_type = ConfigParser.detect_format(file_path)

        try:
            content = file_path.read_text(encoding='utf-8')

            if format_type == ConfigFormat.YAML:
                data = yaml.safe_load(content) or {}
            else:
                data = json.loads(content)
        except yaml.YAMLError as e:
            raise ConfigParserError(f"Invalid YAML syntax: {e}")
        except json.JSONDecodeError as e:
            raise ConfigParserError(f"Invalid JSON syntax: {e}")
        except OSError as e:
            raise ConfigParserError(f"Error reading file: {e}")

        if not isinstance(data, dict):
            raise ConfigParserError(f"Configuration root must be a mapping: {file_path}")

        return data

    @staticmethod
    def parse_settings(data: Dict[str, Any]) -> DirectionsSettings:
        """Validate raw configuration data"""
        # Settings may live at the top level or under a "directions" key
        section = data.get('directions', data)

        try:
            return DirectionsSettings(**section)
        except ValidationError as e:
            raise ConfigParserError(f"Invalid directions settings: {e}")

    @staticmethod
    def load_settings(file_path: Path) -> DirectionsSettings:
        """Load and validate settings from a file"""
        return ConfigParser.parse_settings(ConfigParser.load_file(file_path))

    @staticmethod
    def save_settings(
        settings: DirectionsSettings,
        file_path: Path,
        format_type: Optional[ConfigFormat] = None,
        include_secrets: bool = False,
    ) -> None:
        """Save settings to file, without the API key unless asked"""
        if format_type is None:
            format_type = ConfigParser.detect_format(file_path)

        # Ensure parent directory exists
        file_path.parent.mkdir(parents=True, exist_ok=True)

        exclude = None if include_secrets else {'api_key'}
        config_dict = {
            'directions': settings.model_dump(exclude_none=True, exclude=exclude, mode='json')
        }

        if format_type == ConfigFormat.YAML:
            content = yaml.dump(
                config_dict,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2
            )
        else:
            content = json.dumps(config_dict, indent=2, ensure_ascii=False)

        try:
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise ConfigParserError(f"Error saving file: {e}")
