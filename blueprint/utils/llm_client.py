"""
LLM Client for unified LLM provider management.

Provides a clean abstraction over the supported LLM providers with automatic
client selection via Factory pattern.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .logger_setup import get_logger

logger = get_logger(__name__)


class BaseLLMClient(ABC):
    """Base class for all LLM clients."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 4000
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        self.client = self._init_client()

    @abstractmethod
    def _init_client(self):
        """Initialize provider-specific client."""
        pass

    @abstractmethod
    def call(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Tuple[str, int]:
        """
        Execute LLM call.

        Args:
            prompt: User prompt text
            system: Optional system instruction sent ahead of the prompt
            temperature: Overrides the client default (optional)
            max_tokens: Overrides the client default (optional)

        Returns:
            Tuple[str, int]: (response_text, total_tokens)
        """
        pass


class OpenAIClient(BaseLLMClient):
    """OpenAI LLM client."""

    def _init_client(self):
        """Initialize OpenAI client."""
        import openai
        if self.base_url:
            return openai.OpenAI(api_key=self.api_key, base_url=self.base_url)
        return openai.OpenAI(api_key=self.api_key)

    def call(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Tuple[str, int]:
        temp = temperature if temperature is not None else self.temperature
        max_tok = max_tokens if max_tokens is not None else self.max_tokens

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temp,
                max_tokens=max_tok
            )
        except Exception as e:
            logger.error(f"Error calling OpenAI API: {e}")
            raise

        tokens = response.usage.total_tokens if response.usage else 0
        return response.choices[0].message.content or "", tokens


class AnthropicClient(BaseLLMClient):
    """Anthropic LLM client."""

    def _init_client(self):
        """Initialize Anthropic client."""
        import anthropic
        if self.base_url:
            return anthropic.Anthropic(api_key=self.api_key, base_url=self.base_url)
        return anthropic.Anthropic(api_key=self.api_key)

    def call(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Tuple[str, int]:
        temp = temperature if temperature is not None else self.temperature
        max_tok = max_tokens if max_tokens is not None else self.max_tokens

        kwargs = {}
        if system:
            kwargs["system"] = system

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=max_tok,
                temperature=temp,
                messages=[{"role": "user", "content": prompt}],
                **kwargs
            )
        except Exception as e:
            logger.error(f"Error calling Anthropic API: {e}")
            raise

        tokens = response.usage.input_tokens + response.usage.output_tokens
        text = "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
        return text, tokens


class LLMClientFactory:
    """Factory for creating LLM clients based on provider."""

    _providers = {
        'openai': OpenAIClient,
        'anthropic': AnthropicClient,
    }

    @classmethod
    def providers(cls):
        """Names of the supported providers."""
        return list(cls._providers.keys())

    @classmethod
    def create(
        cls,
        provider: str,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 4000
    ) -> BaseLLMClient:
        """
        Create LLM client based on provider.

        Args:
            provider: Provider name ('openai', 'anthropic')
            model: Model identifier
            api_key: API key for the provider
            base_url: Custom base URL (optional)
            temperature: Sampling temperature (default: 0.7)
            max_tokens: Maximum tokens in the response (default: 4000)

        Returns:
            BaseLLMClient: Client instance for the provider

        Raises:
            ValueError: If the provider is not supported
        """
        provider = provider.lower()
        if provider not in cls._providers:
            raise ValueError(
                f"Provider '{provider}' is not supported. "
                f"Available providers: {cls.providers()}"
            )

        client_class = cls._providers[provider]
        logger.debug(f"Creating {provider} client (model={model}, temp={temperature}, max_tokens={max_tokens})")
        return client_class(
            model=model,
            api_key=api_key,
            base_url=base_url,
            temperature=temperature,
            max_tokens=max_tokens
        )
