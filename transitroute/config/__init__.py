"""
transitroute Configuration Module
Handles provider settings from the environment and YAML/JSON files
"""

from .models import ConfigFormat, DirectionsSettings
from .parser import ConfigParser, ConfigParserError

__all__ = [
    "ConfigFormat",
    "DirectionsSettings",
    "ConfigParser",
    "ConfigParserError",
]
