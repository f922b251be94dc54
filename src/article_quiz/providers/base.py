"""
Base protocol for AI model providers

Defines the chat-completion interface the quiz generator and the article
assistant are written against.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Any


class ProviderError(Exception):
    """Base exception for provider errors."""
    pass


class RateLimitError(ProviderError):
    """Rate limit exceeded."""
    pass


class AuthenticationError(ProviderError):
    """Authentication failed."""
    pass


def classify_error(label: str, error: Exception) -> ProviderError:
    """Map an SDK/transport exception onto the provider error taxonomy."""
    if isinstance(error, ProviderError):
        return error

    error_str = str(error).lower()

    if "rate" in error_str or "429" in error_str:
        return RateLimitError(f"{label} rate limit exceeded: {error}")

    if "auth" in error_str or "401" in error_str or "api key" in error_str:
        return AuthenticationError(f"{label} authentication failed: {error}")

    return ProviderError(f"{label} API error: {error}")


def pick_model(available: List[str], preferred: Optional[str], default: str) -> Optional[str]:
    """
    Choose a model from the ones a provider offers.

    Keeps the preferred model if it is offered, otherwise falls back to the
    default when that is offered, otherwise gives up.
    """
    if preferred and preferred in available:
        return preferred
    if default in available:
        return default
    return None


@dataclass
class ModelResponse:
    """Response from an AI model."""
    content: str
    model: str
    provider: str
    usage: dict = field(default_factory=dict)
    raw_response: Optional[Any] = None

    @property
    def input_tokens(self) -> int:
        """Number of input tokens used."""
        return self.usage.get("input_tokens", 0)

    @property
    def output_tokens(self) -> int:
        """Number of output tokens used."""
        return self.usage.get("output_tokens", 0)

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens


class ModelProvider(ABC):
    """
    Abstract base class for AI model providers.

    Providers must implement generate() for a single system + user
    exchange, and may implement list_models() when the backend can
    enumerate its models.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'groq', 'openai', 'claude')."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model ID for this provider."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.2,
        **kwargs
    ) -> ModelResponse:
        """
        Generate a response from the model.

        Args:
            prompt: The user message
            system: Optional system message
            model: Model ID (uses default if not specified)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Provider-specific options

        Returns:
            ModelResponse with generated content

        Raises:
            ProviderError: On API errors
            RateLimitError: When rate limited
            AuthenticationError: On auth failures
        """
        pass

    async def list_models(self) -> List[str]:
        """
        List the model IDs this provider offers.

        Raises:
            ProviderError: If the provider cannot enumerate models
        """
        raise ProviderError(f"{self.name} provider does not support listing models")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.default_model!r})"
