"""
Configuration Management System

Pydantic-based configuration with hierarchical loading from CLI arguments,
environment variables, YAML/JSON files and defaults.
"""

from .manager import ConfigManager
from .models import AppConfig, CardConfig, FilterConfig

__all__ = [
    'ConfigManager',
    'AppConfig',
    'CardConfig',
    'FilterConfig',
]
