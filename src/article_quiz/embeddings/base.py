"""
Base protocol for embedding providers

An embedding provider turns a piece of text into a fixed-length vector.
Failures are reported as EmbeddingUnavailable so that callers can fail closed.
"""

from abc import ABC, abstractmethod
from typing import List

from ..errors import EmbeddingUnavailable


class EmbeddingProvider(ABC):
    """Abstract base class for sentence embedding backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'local', 'openai')."""
        pass

    @abstractmethod
    def embed(self, text: str) -> List[float]:
        """
        Embed a single piece of text.

        Raises:
            EmbeddingUnavailable: If no vector can be produced
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = ["EmbeddingProvider", "EmbeddingUnavailable"]
