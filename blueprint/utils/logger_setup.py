"""
Centralized logging configuration for blueprint.

Provides a simple, consistent logging interface across all modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class LoggerManager:
    """Manages logging configuration for the application."""

    _initialized = False
    _log_file = None

    @classmethod
    def setup_logging(cls, log_file: Optional[str] = None, level: str = "INFO", console: bool = True):
        """
        Setup logging configuration.

        Args:
            log_file (Optional[str]): Path to log file. If None, no file is written.
            level (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console (bool): Enable console logging on stderr
        """
        if cls._initialized:
            return

        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger('blueprint')
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()

        # stdout is reserved for click.echo output
        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding='utf-8')
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Close handlers and allow setup_logging to run again."""
        root_logger = logging.getLogger('blueprint')
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        cls._initialized = False
        cls._log_file = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a specific module.

        Args:
            name (str): Module name (usually __name__)

        Returns:
            logging.Logger: Logger under the 'blueprint' hierarchy
        """
        if name == 'blueprint' or name.startswith('blueprint.'):
            return logging.getLogger(name)
        return logging.getLogger(f'blueprint.{name}')


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name (str): Module name (usually __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return LoggerManager.get_logger(name)
