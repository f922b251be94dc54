"""
Shared fixtures for article-quiz tests.
"""

import pytest

from article_quiz.embeddings.mock import MockEmbeddingProvider
from article_quiz.similarity import SimilarityComparator
from article_quiz.quiz.grader import AnswerGrader
from article_quiz.quiz.schema import TrueFalse, MultipleChoice, FillBlank


@pytest.fixture
def embeddings():
    """Deterministic bag-of-words embeddings."""
    return MockEmbeddingProvider()


@pytest.fixture
def comparator(embeddings):
    return SimilarityComparator(embeddings)


@pytest.fixture
def grader(comparator):
    return AnswerGrader(comparator)


@pytest.fixture
def sample_questions():
    """One question of each kind."""
    return (
        [TrueFalse(question="Sky is blue", answer=True)],
        [MultipleChoice(question="2+2?", options=["3", "4", "5", "6"], answer=2)],
        [FillBlank(question="The capital of France is __.", answer="Paris")],
    )
