"""
Semantic similarity between short answers

Compares two strings by the cosine of their sentence embeddings. Callers are
expected to normalise case before comparing; nothing is normalised here.
"""

import logging
import math
from typing import Optional, Sequence

from .embeddings.base import EmbeddingProvider
from .errors import EmbeddingUnavailable

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.65


def cosine_similarity(vector1: Sequence[float], vector2: Sequence[float]) -> float:
    """
    Cosine of the angle between two vectors, in [-1, 1].

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        ValueError: If the vectors have different lengths
    """
    if len(vector1) != len(vector2):
        raise ValueError(f"Vector length mismatch: {len(vector1)} != {len(vector2)}")

    dot_product = sum(x * y for x, y in zip(vector1, vector2))
    magnitude1 = math.sqrt(sum(x * x for x in vector1))
    magnitude2 = math.sqrt(sum(y * y for y in vector2))

    if magnitude1 == 0.0 or magnitude2 == 0.0:
        return 0.0

    return max(-1.0, min(1.0, dot_product / (magnitude1 * magnitude2)))


class SimilarityComparator:
    """
    Embedding-backed string comparator.

    similarity() reports the raw score; is_equivalent() turns it into a
    fail-closed yes/no against an inclusive threshold.
    """

    def __init__(self, provider: EmbeddingProvider, threshold: float = DEFAULT_THRESHOLD):
        """
        Initialize comparator.

        Args:
            provider: Embedding backend used for both strings
            threshold: Default minimum score for equivalence
        """
        self.provider = provider
        self.threshold = threshold

    def _embed(self, text: str) -> list:
        try:
            return self.provider.embed(text)
        except EmbeddingUnavailable:
            raise
        except Exception as e:
            raise EmbeddingUnavailable(f"{self.provider.name} embedding failed: {e}")

    def similarity(self, a: str, b: str) -> float:
        """
        Cosine similarity of the embeddings of a and b.

        Raises:
            EmbeddingUnavailable: If either string cannot be embedded
            ValueError: If the provider returns vectors of different lengths
        """
        return cosine_similarity(self._embed(a), self._embed(b))

    def is_equivalent(self, a: str, b: str, threshold: Optional[float] = None) -> bool:
        """Whether a and b score at least `threshold`; False if unscorable."""
        threshold = self.threshold if threshold is None else threshold

        try:
            score = self.similarity(a, b)
        except (EmbeddingUnavailable, ValueError) as e:
            logger.warning(f"Similarity unavailable, treating answers as different: {e}")
            return False

        logger.debug(f"Similarity {score:.4f} (threshold {threshold})")
        return score >= threshold

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r}, threshold={self.threshold})"
