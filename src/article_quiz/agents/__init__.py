"""
AI agents for article-quiz

Prompt templates and the article assistant (headline and keywords).
"""

from .assistant import ArticleAssistant, ArticleSummary
from .prompts import QUESTION_SYSTEM_PROMPTS, format_question_system_prompt

__all__ = [
    "ArticleAssistant",
    "ArticleSummary",
    "QUESTION_SYSTEM_PROMPTS",
    "format_question_system_prompt",
]
