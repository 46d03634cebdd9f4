# clopts — MIT Licensed
"""Global logger instance for clopts."""
import logging

logger: logging.Logger = logging.getLogger("clopts")
