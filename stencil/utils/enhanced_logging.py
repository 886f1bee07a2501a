# stencil/utils/enhanced_logging.py
from typing import Dict, Any

from loguru import logger as _loguru_logger


class EnhancedLogger:
    """Named logger with context tracking on top of loguru."""
    
    def __init__(self, name: str):
        self._name = name
        self._context: Dict[str, Any] = {}
    
    def with_context(self, **context) -> 'EnhancedLogger':
        """Create a new logger with added context."""
        new_logger = EnhancedLogger(self._name)
        new_logger._context = {**self._context, **context}
        return new_logger
    
    def _bound(self, extra: Dict[str, Any]):
        # depth=1 attributes the record to the caller of debug()/info()/...
        return _loguru_logger.bind(
            logger_name=self._name, **self._context, **(extra or {})
        ).opt(depth=1)
    
    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log a debug message with context."""
        extra = kwargs.pop("extra", {})
        self._bound(extra).debug(msg, *args, **kwargs)
    
    def info(self, msg: str, *args, **kwargs) -> None:
        """Log an info message with context."""
        extra = kwargs.pop("extra", {})
        self._bound(extra).info(msg, *args, **kwargs)
    
    def warning(self, msg: str, *args, **kwargs) -> None:
        """Log a warning message with context."""
        extra = kwargs.pop("extra", {})
        self._bound(extra).warning(msg, *args, **kwargs)
    
    def error(self, msg: str, *args, **kwargs) -> None:
        """Log an error message with context."""
        extra = kwargs.pop("extra", {})
        self._bound(extra).error(msg, *args, **kwargs)
    
    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log an error message together with the active exception's traceback."""
        extra = kwargs.pop("extra", {})
        _loguru_logger.bind(
            logger_name=self._name, **self._context, **(extra or {})
        ).opt(depth=1, exception=True).error(msg, *args, **kwargs)

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._name
