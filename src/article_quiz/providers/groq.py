"""
Groq provider implementation

Groq serves open-weight models behind an OpenAI-compatible API.
"""

from .compat import OpenAIProvider


class GroqProvider(OpenAIProvider):
    """
    Groq provider.

    API key is read from:
    1. Constructor argument
    2. GROQ_API_KEY environment variable
    """

    BASE_URL = "https://api.groq.com/openai/v1"
    API_KEY_ENV = "GROQ_API_KEY"
    DEFAULT_MODEL = "llama-3.1-8b-instant"
    LABEL = "Groq"

    @property
    def name(self) -> str:
        return "groq"
