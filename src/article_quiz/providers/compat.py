"""
OpenAI-compatible provider implementation

Any backend that speaks the OpenAI chat-completions API (OpenAI itself,
Groq, local servers) goes through the openai SDK with a custom base URL.
"""

import os
from typing import Optional, List

from .base import ModelProvider, ModelResponse, ProviderError, AuthenticationError, classify_error


class OpenAIProvider(ModelProvider):
    """
    OpenAI chat-completions provider.

    API key is read from:
    1. Constructor argument
    2. The class's API_KEY_ENV environment variable
    """

    BASE_URL: Optional[str] = None  # None = SDK default
    API_KEY_ENV = "OPENAI_API_KEY"
    DEFAULT_MODEL = "gpt-4o-mini"
    LABEL = "OpenAI"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize provider.

        Args:
            api_key: API key (falls back to env var)
            default_model: Default model to use
            base_url: API base URL (defaults to the class's BASE_URL)
        """
        self._api_key = api_key or os.getenv(self.API_KEY_ENV)
        self._default_model = default_model or self.DEFAULT_MODEL
        self._base_url = base_url or self.BASE_URL
        self._client = None

    def _get_client(self):
        """Lazy initialization of the AsyncOpenAI client."""
        if self._client is None:
            if not self._api_key:
                raise AuthenticationError(
                    f"No {self.LABEL} API key provided. Set {self.API_KEY_ENV} or pass api_key to constructor."
                )
            try:
                from openai import AsyncOpenAI
                self._client = AsyncOpenAI(
                    api_key=self._api_key,
                    base_url=self._base_url,
                )
            except ImportError:
                raise ProviderError("openai package not installed. Run: pip install openai")
        return self._client

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self._default_model

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
        """Generate a chat completion."""
        client = self._get_client()
        model = model or self._default_model

        try:
            messages = []
            if system:
                messages.append({"role": "system", "content": system})
            messages.append({"role": "user", "content": prompt})

            response = await client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                stream=False,
            )

            content = ""
            if response.choices and response.choices[0].message:
                content = response.choices[0].message.content or ""

            usage = {}
            if response.usage:
                usage = {
                    "input_tokens": response.usage.prompt_tokens,
                    "output_tokens": response.usage.completion_tokens,
                }

            return ModelResponse(
                content=content,
                model=response.model,
                provider=self.name,
                usage=usage,
                raw_response=response,
            )

        except Exception as e:
            raise classify_error(self.LABEL, e)

    async def list_models(self) -> List[str]:
        """List model IDs from the /models endpoint."""
        client = self._get_client()

        try:
            page = await client.models.list()
            return [m.id for m in page.data]
        except Exception as e:
            raise classify_error(self.LABEL, e)
