# stencil/utils/logging.py
"""
Logging configuration for Stencil.
"""
import sys

from loguru import logger
from stencil.constants import LOG_DIR, LOG_FORMAT, LOG_ROTATION, LOG_RETENTION
from stencil.utils.enhanced_logging import EnhancedLogger

# Dictionary to store enhanced logger instances
_enhanced_loggers = {}

# Records emitted before setup_logging() still need a logger_name for LOG_FORMAT
logger.configure(extra={"logger_name": "stencil"})


def setup_logging(debug: bool = False, log_to_file: bool = True) -> None:
    """
    Configure the application logging.
    
    Args:
        debug: Whether to enable debug logging.
        log_to_file: Whether to add the rotating file sink.
    """
    # Remove default handlers
    logger.remove()
    
    # Add console handler with appropriate level
    log_level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        diagnose=debug,  # Include variable values in traceback if debug is True
    )
    
    if not log_to_file:
        return
    
    # Ensure log directory exists
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    
    log_file = LOG_DIR / "stencil.log"
    logger.add(
        log_file,
        format=LOG_FORMAT,
        level="DEBUG" if debug else "INFO",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )
    
    logger.debug(f"Logging initialized. Log file: {log_file}")


def get_logger(name: str = "stencil") -> EnhancedLogger:
    """
    Get a logger instance with the given name.
    
    Args:
        name: The name for the logger.
        
    Returns:
        An enhanced logger instance.
    """
    if name in _enhanced_loggers:
        return _enhanced_loggers[name]
    
    enhanced_logger = EnhancedLogger(name)
    _enhanced_loggers[name] = enhanced_logger
    
    return enhanced_logger
