"""Utility modules."""

from .file_service import FileService
from .llm_client import BaseLLMClient, LLMClientFactory
from .logger_setup import get_logger, LoggerManager

__all__ = [
    # File access
    "FileService",
    # LLM clients
    "BaseLLMClient",
    "LLMClientFactory",
    # Logging utilities
    "get_logger",
    "LoggerManager",
]
