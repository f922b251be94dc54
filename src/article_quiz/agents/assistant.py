"""
Article assistant

Asks the model for a headline and a keyword list for an article. Both
degrade to neutral values when the provider fails.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import GenerationConfig
from ..providers.base import ModelProvider, ProviderError
from .prompts import TITLE_TASK, KEYWORDS_TASK, format_assistant_prompts

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"
_QUOTE_PAIRS = [('"', '"'), ("'", "'"), ("“", "”"), ("‘", "’")]


def strip_outer_quotes(text: str) -> str:
    """Remove one pair of matching quotes wrapping the whole string."""
    text = text.strip()
    for opening, closing in _QUOTE_PAIRS:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            return text[1:-1].strip()
    return text


def split_keywords(text: str) -> list[str]:
    """Split a comma-separated reply into trimmed, non-empty keywords."""
    return [k.strip() for k in text.split(",") if k.strip()]


@dataclass
class ArticleSummary:
    """Headline and keywords for an article."""
    title: str
    keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"title": self.title, "keywords": self.keywords}


class ArticleAssistant:
    """Generates article metadata with a chat model."""

    def __init__(
        self,
        provider: ModelProvider,
        model: Optional[str] = None,
        settings: Optional[GenerationConfig] = None,
    ):
        """
        Initialize assistant.

        Args:
            provider: AI model provider
            model: Optional model override
            settings: Sampling settings (defaults to GenerationConfig())
        """
        self.provider = provider
        self.model = model
        self.settings = settings or GenerationConfig()

    async def _ask(self, task: str, content: str) -> str:
        system, prompt = format_assistant_prompts(task, content)
        try:
            response = await self.provider.generate(
                prompt=prompt,
                system=system,
                model=self.model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except ProviderError as e:
            logger.warning(f"Assistant call for {task!r} failed: {e}")
            return ""
        return response.content

    async def suggest_title(self, content: str) -> str:
        """Headline for the article, or "Untitled"."""
        title = strip_outer_quotes(await self._ask(TITLE_TASK, content))
        return title or UNTITLED

    async def extract_keywords(self, content: str) -> list[str]:
        """Keywords for the article, possibly empty."""
        return split_keywords(await self._ask(KEYWORDS_TASK, content))

    async def summarize(self, content: str) -> ArticleSummary:
        """Title and keywords, requested concurrently."""
        title, keywords = await asyncio.gather(
            self.suggest_title(content),
            self.extract_keywords(content),
        )
        return ArticleSummary(title=title, keywords=keywords)
