"""
Tests for the article assistant.
"""

import pytest

from article_quiz.agents.assistant import (
    ArticleAssistant,
    ArticleSummary,
    strip_outer_quotes,
    split_keywords,
)
from article_quiz.providers.mock import MockProvider


class TestHelpers:
    """Tests for reply clean-up helpers."""

    @pytest.mark.parametrize("raw,expected", [
        ('"A Headline"', "A Headline"),
        ("'A Headline'", "A Headline"),
        ("“A Headline”", "A Headline"),
        ("A \"quoted\" word", 'A "quoted" word'),
        ("  Plain  ", "Plain"),
        ('"', '"'),
    ])
    def test_strip_outer_quotes(self, raw, expected):
        assert strip_outer_quotes(raw) == expected

    def test_split_keywords(self):
        assert split_keywords("paris, france ,, seine, ") == ["paris", "france", "seine"]

    def test_split_empty(self):
        assert split_keywords("") == []


class TestArticleAssistant:
    """Tests for ArticleAssistant."""

    @pytest.mark.asyncio
    async def test_title(self):
        assistant = ArticleAssistant(MockProvider(fixed_response='"Paris Explained"'))
        assert await assistant.suggest_title("text") == "Paris Explained"

    @pytest.mark.asyncio
    async def test_empty_title(self):
        assistant = ArticleAssistant(MockProvider(fixed_response="  "))
        assert await assistant.suggest_title("text") == "Untitled"

    @pytest.mark.asyncio
    async def test_failed_title(self):
        assistant = ArticleAssistant(MockProvider(fail_rate=1.0))
        assert await assistant.suggest_title("text") == "Untitled"

    @pytest.mark.asyncio
    async def test_keywords(self):
        assistant = ArticleAssistant(MockProvider(fixed_response="paris, france, seine"))
        assert await assistant.extract_keywords("text") == ["paris", "france", "seine"]

    @pytest.mark.asyncio
    async def test_failed_keywords(self):
        assistant = ArticleAssistant(MockProvider(fail_rate=1.0))
        assert await assistant.extract_keywords("text") == []

    @pytest.mark.asyncio
    async def test_prompts(self):
        provider = MockProvider(fixed_response="x")
        await ArticleAssistant(provider).suggest_title("Body")

        call = provider.calls[0]
        assert call["prompt"] == "I have the following document: Body"
        assert "writing headlines" in call["system"]

    @pytest.mark.asyncio
    async def test_summarize(self):
        provider = MockProvider()
        summary = await ArticleAssistant(provider).summarize("Paris sits beside the Seine river")

        assert isinstance(summary, ArticleSummary)
        assert summary.title == "Paris sits beside the Seine river"
        assert summary.keywords == ["paris", "beside", "seine", "river"]
        assert len(provider.calls) == 2
