"""
Configuration management for blueprint.

Handles environment loading, language-model settings and the sample .env file.
"""

import os
from pathlib import Path
from typing import Optional, Union
from dataclasses import dataclass, asdict

from dotenv import load_dotenv

from .errors import ConfigError
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)

ENV_FILE_NAME = ".env"

SAMPLE_ENV_CONTENT = """# Environment Variables for Blueprint
# Uncomment and set the API key to enable AI-generated content
# OPENAI_API_KEY=your-api-key-here
"""

# Provider -> environment variable prefix
PROVIDER_PREFIXES = {
    'openai': 'OPENAI',
    'anthropic': 'ANTHROPIC',
}

DEFAULT_MODELS = {
    'openai': 'gpt-4o',
    'anthropic': 'claude-3-5-sonnet-latest',
}


@dataclass
class LLMConfig:
    """LLM provider configuration."""
    provider: str = "openai"
    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 4000

    def __post_init__(self):
        """Fill unset values from environment variables based on provider."""
        self.provider = os.getenv("BLUEPRINT_PROVIDER", self.provider).lower()

        prefix = PROVIDER_PREFIXES.get(self.provider)
        if not prefix:
            raise ConfigError(
                f"Provider '{self.provider}' is not supported. Use: {list(PROVIDER_PREFIXES.keys())}"
            )

        if not self.model:
            self.model = os.getenv(f"{prefix}_MODEL") or DEFAULT_MODELS[self.provider]

        if not self.api_key:
            self.api_key = os.getenv(f"{prefix}_API_KEY") or None
        if not self.base_url:
            base_url_env = os.getenv(f"{prefix}_BASE_URL")
            if base_url_env:  # Only set if env var is not empty
                self.base_url = base_url_env

        temp_str = os.getenv(f"{prefix}_TEMPERATURE")
        max_tokens_str = os.getenv(f"{prefix}_MAX_TOKENS")
        try:
            if temp_str:
                self.temperature = float(temp_str)
            if max_tokens_str:
                self.max_tokens = int(max_tokens_str)
        except ValueError as e:
            raise ConfigError(f"Invalid {prefix} sampling setting", cause=e)

    @property
    def api_key_env_var(self) -> str:
        """Name of the environment variable holding the credential."""
        return f"{PROVIDER_PREFIXES[self.provider]}_API_KEY"

    def to_dict(self) -> dict:
        """Convert to dictionary with the credential masked."""
        data = asdict(self)
        if data['api_key']:
            data['api_key'] = '***'
        return data


def load_environment(dir_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a .env file without overriding existing ones.

    Args:
        dir_path: Directory holding the .env file. Defaults to the current directory.

    Returns:
        True if a .env file was found and loaded
    """
    env_file = Path(dir_path or os.getcwd()) / ENV_FILE_NAME
    if not env_file.is_file():
        return False

    logger.debug(f"Loading environment from {env_file}")
    return load_dotenv(env_file, override=False)


def create_sample_env_file(dir_path: Union[str, Path]) -> bool:
    """
    Create a sample .env file if one doesn't exist in dir_path.

    Args:
        dir_path: Directory to create the .env file in

    Returns:
        True if a new file was created, False if it already existed or could not be written
    """
    env_file = Path(dir_path) / ENV_FILE_NAME
    if env_file.exists():
        return False

    try:
        env_file.parent.mkdir(parents=True, exist_ok=True)
        with open(env_file, 'w', encoding='utf-8') as f:
            f.write(SAMPLE_ENV_CONTENT)
        return True
    except OSError as e:
        logger.error(f"Error creating .env file: {e}")
        return False
