"""Core functionality modules."""

from .cli import cli, main
from .config import LLMConfig, create_sample_env_file, load_environment
from .content_generator import ContentGenerator, LLMContentGenerator, NullContentGenerator
from .errors import BlueprintError, ConfigError, FileSystemError, GenerationError, UserInputError
from .generator import DocumentationGenerator
from .models import ProjectInfo, load_project_info
from .prompts import ProjectInfoCollector, derive_description
from .templates import FileTemplate, TEMPLATES

__all__ = [
    # CLI
    "cli",
    "main",
    # Config
    "LLMConfig",
    "create_sample_env_file",
    "load_environment",
    # Content generation
    "ContentGenerator",
    "LLMContentGenerator",
    "NullContentGenerator",
    "DocumentationGenerator",
    # Errors
    "BlueprintError",
    "ConfigError",
    "FileSystemError",
    "GenerationError",
    "UserInputError",
    # Project info
    "ProjectInfo",
    "load_project_info",
    "ProjectInfoCollector",
    "derive_description",
    # Templates
    "FileTemplate",
    "TEMPLATES",
]
