"""
AI model providers for article-quiz

Supports multiple AI providers with a common interface.
Providers: Groq, OpenAI, Claude (Anthropic), Mock
"""

from .base import (
    ModelProvider, ModelResponse, ProviderError, RateLimitError,
    AuthenticationError, pick_model,
)
from .compat import OpenAIProvider
from .groq import GroqProvider
from .claude import ClaudeProvider
from .mock import MockProvider

__all__ = [
    # Base classes and types
    "ModelProvider",
    "ModelResponse",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "pick_model",
    # Providers
    "GroqProvider",
    "OpenAIProvider",
    "ClaudeProvider",
    "MockProvider",
]


def get_provider(name: str, **kwargs) -> ModelProvider:
    """
    Factory function to get a provider by name.

    Args:
        name: Provider name ('groq', 'openai', 'claude', 'mock')
        **kwargs: Provider-specific options

    Returns:
        Configured ModelProvider instance

    Raises:
        ValueError: If provider name is unknown
    """
    providers = {
        "groq": GroqProvider,
        "openai": OpenAIProvider,
        "claude": ClaudeProvider,
        "mock": MockProvider,
    }

    if name not in providers:
        raise ValueError(f"Unknown provider: {name}. Valid options: {list(providers.keys())}")

    return providers[name](**kwargs)
