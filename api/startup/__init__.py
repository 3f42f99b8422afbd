"""Startup modules for component initialization.

- ConfigValidator: fail fast on missing upstream credentials
- StartupManager: logging, validation and service wiring
"""

from .config_validator import ConfigValidator, ConfigValidationError
from .manager import StartupManager

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'StartupManager',
]
