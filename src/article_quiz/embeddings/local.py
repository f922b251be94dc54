"""
Local sentence embeddings via sentence-transformers

The model is loaded on first use and kept for the life of the provider.
"""

import logging
from typing import List, Optional

from .base import EmbeddingProvider
from ..errors import EmbeddingUnavailable

logger = logging.getLogger(__name__)


class SentenceTransformerEmbedding(EmbeddingProvider):
    """Embeds text with a locally loaded SentenceTransformer model."""

    DEFAULT_MODEL = "all-MiniLM-L6-v2"

    def __init__(self, model_name: Optional[str] = None, device: Optional[str] = None):
        self.model_name = model_name or self.DEFAULT_MODEL
        self.device = device
        self._model = None

    def _get_model(self):
        """Lazy load of the SentenceTransformer model."""
        if self._model is None:
            try:
                from sentence_transformers import SentenceTransformer
            except ImportError:
                raise EmbeddingUnavailable(
                    "sentence-transformers not installed. Run: pip install 'article-quiz[local]'"
                )
            try:
                self._model = SentenceTransformer(self.model_name, device=self.device)
            except Exception as e:
                raise EmbeddingUnavailable(f"Could not load embedding model {self.model_name}: {e}")
            logger.debug(f"Loaded embedding model {self.model_name}")
        return self._model

    @property
    def name(self) -> str:
        return "local"

    def embed(self, text: str) -> List[float]:
        model = self._get_model()
        try:
            vector = model.encode(text)
        except Exception as e:
            raise EmbeddingUnavailable(f"Embedding failed: {e}")
        return [float(x) for x in vector]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model_name!r})"
