# myip/core/plugin.py
import logging
from abc import ABC
from typing import Any, Optional


class BasePlugin(ABC):
    """
    The abstract base class for the pluggable units of myip (address sources, probes).
    It carries the plugin identity and a logger bound to the concrete class.
    """
    # --- Core Plugin Attributes (set by concrete plugins or by the registry) ---
    name: str
    version: str
    description: Optional[str] = None

    logger: logging.Logger

    def __init__(self, **kwargs: Any):
        """
        Initializes the BasePlugin.

        Args:
            **kwargs: Absorbs keyword arguments that concrete plugins do not handle.
        """
        # Handlers and levels are configured by the application's entry point.
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    # --- Logging Methods ---
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Logs an informational message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Logs a warning message."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, exc_info: bool = False, **kwargs: Any) -> None:
        """Logs an error message. Set exc_info=True to include exception info."""
        self.logger.error(message, *args, exc_info=exc_info, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Logs a debug message."""
        self.logger.debug(message, *args, **kwargs)
