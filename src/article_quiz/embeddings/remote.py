"""
Remote embeddings via the OpenAI embeddings endpoint
"""

import os
from typing import List, Optional

from .base import EmbeddingProvider
from ..errors import EmbeddingUnavailable


class OpenAIEmbedding(EmbeddingProvider):
    """
    OpenAI embeddings provider.

    API key is read from:
    1. Constructor argument
    2. OPENAI_API_KEY environment variable
    """

    DEFAULT_MODEL = "text-embedding-3-small"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self._api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.model_name = model_name or self.DEFAULT_MODEL
        self._base_url = base_url
        self._client = None

    def _get_client(self):
        """Lazy initialization of the OpenAI client."""
        if self._client is None:
            if not self._api_key:
                raise EmbeddingUnavailable(
                    "No OpenAI API key provided. Set OPENAI_API_KEY or pass api_key to constructor."
                )
            try:
                from openai import OpenAI
            except ImportError:
                raise EmbeddingUnavailable("openai package not installed. Run: pip install openai")
            self._client = OpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client

    @property
    def name(self) -> str:
        return "openai"

    def embed(self, text: str) -> List[float]:
        client = self._get_client()
        try:
            response = client.embeddings.create(model=self.model_name, input=text)
        except Exception as e:
            raise EmbeddingUnavailable(f"OpenAI embedding failed: {e}")
        if not response.data:
            raise EmbeddingUnavailable("OpenAI returned no embedding")
        return list(response.data[0].embedding)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model_name!r})"
