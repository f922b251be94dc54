"""
Embedding providers for article-quiz

Backends: local sentence-transformers model, OpenAI embeddings, Mock
"""

from .base import EmbeddingProvider, EmbeddingUnavailable
from .local import SentenceTransformerEmbedding
from .remote import OpenAIEmbedding
from .mock import MockEmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "EmbeddingUnavailable",
    "SentenceTransformerEmbedding",
    "OpenAIEmbedding",
    "MockEmbeddingProvider",
]


def get_embedding_provider(name: str, **kwargs) -> EmbeddingProvider:
    """
    Factory function to get an embedding provider by name.

    Args:
        name: Provider name ('local', 'openai', 'mock')
        **kwargs: Provider-specific options

    Raises:
        ValueError: If provider name is unknown
    """
    providers = {
        "local": SentenceTransformerEmbedding,
        "openai": OpenAIEmbedding,
        "mock": MockEmbeddingProvider,
    }

    if name not in providers:
        raise ValueError(f"Unknown embedding provider: {name}. Valid options: {list(providers.keys())}")

    return providers[name](**kwargs)
