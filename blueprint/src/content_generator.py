"""
Content generators used by the documentation pipeline.

Any object with is_available() and generate_content(prompt) satisfies the
ContentGenerator protocol; the LLM-backed and null generators below are the
two shipped implementations.
"""

from typing import Optional, Protocol

from .config import LLMConfig
from .constants import SYSTEM_PROMPT
from .errors import GenerationError
from ..utils.llm_client import BaseLLMClient, LLMClientFactory
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


class ContentGenerator(Protocol):
    """Anything that can turn a prompt into markdown."""

    def is_available(self) -> bool:
        ...

    def generate_content(self, prompt: str) -> Optional[str]:
        ...


class NullContentGenerator:
    """Generator that never produces content; the pipeline falls back to templates."""

    def is_available(self) -> bool:
        return False

    def generate_content(self, prompt: str) -> Optional[str]:
        return None


class LLMContentGenerator:
    """Generates documentation with a language model."""

    def __init__(self, config: LLMConfig, client: Optional[BaseLLMClient] = None):
        """
        Initialize LLMContentGenerator.

        Args:
            config: LLM settings; without an API key the generator is unavailable
            client: Pre-built client (mainly for tests). Built from config when omitted.
        """
        self.config = config
        self.client = client

        if self.client is None and config.api_key:
            try:
                self.client = LLMClientFactory.create(
                    provider=config.provider,
                    model=config.model,
                    api_key=config.api_key,
                    base_url=config.base_url,
                    temperature=config.temperature,
                    max_tokens=config.max_tokens
                )
            except Exception as e:
                logger.error(f"Error initializing {config.provider} client: {e}")
                self.client = None

    def is_available(self) -> bool:
        """True if a client was created."""
        return self.client is not None

    def generate_content(self, prompt: str) -> Optional[str]:
        """
        Generate markdown for prompt.

        Returns:
            The completion text, or None when no client is configured, the call
            fails or the model returns nothing
        """
        if self.client is None:
            logger.warning(
                f"{self.config.api_key_env_var} not found. "
                f"Set it to use AI generation."
            )
            return None

        try:
            return self._complete(prompt)
        except GenerationError as e:
            logger.warning(str(e))
            return None
        except Exception as e:
            logger.error(f"Error generating content with {self.config.provider}: {e}")
            return None

    def _complete(self, prompt: str) -> str:
        logger.debug(f"Requesting completion from {self.config.model}")
        text, tokens = self.client.call(
            prompt,
            system=SYSTEM_PROMPT,
            temperature=self.config.temperature
        )
        if not text or not text.strip():
            raise GenerationError(f"{self.config.model} returned empty content")

        logger.debug(f"Completion used {tokens} tokens")
        return text
