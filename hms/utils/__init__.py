# utils/__init__.py

from .logger import logger, setup_logging
from .validation import validate_input

__all__ = ["logger", "setup_logging", "validate_input"]
