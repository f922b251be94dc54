"""
Mock embedding provider for testing

Produces deterministic hashed bag-of-words vectors: texts sharing words
point in similar directions, identical texts in the same direction.
"""

import hashlib
import re
from dataclasses import dataclass, field
from typing import List, Set

from .base import EmbeddingProvider
from ..errors import EmbeddingUnavailable

_WORD_RE = re.compile(r"\w+")


@dataclass
class MockEmbeddingProvider(EmbeddingProvider):
    """
    Mock embedding provider.

    Texts listed in `unavailable` (or every text when `available` is False)
    raise EmbeddingUnavailable, mimicking a missing model or locale.
    """

    dimensions: int = 64
    available: bool = True
    unavailable: Set[str] = field(default_factory=set)
    calls: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return "mock"

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)

        if not self.available or text in self.unavailable:
            raise EmbeddingUnavailable(f"No mock embedding for {text!r}")

        vector = [0.0] * self.dimensions
        for word in _WORD_RE.findall(text):
            digest = hashlib.md5(word.encode("utf-8")).digest()
            vector[digest[0] % self.dimensions] += 1.0
        return vector
