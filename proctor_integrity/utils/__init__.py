"""Utility modules"""

from .logging import log_analysis_event
from .logging_config import get_logger, setup_logging

__all__ = ["log_analysis_event", "get_logger", "setup_logging"]
