"""
article-quiz: LLM-generated self-assessment quizzes for articles.

Generates true/false, multiple-choice and fill-in-the-blank questions from
source text, runs them as a quiz session, and grades free-text answers by
semantic similarity.
"""

__version__ = "0.1.0"

from .config import config, Config
from .errors import (
    QuizError,
    SchemaError,
    DataIntegrityError,
    EmbeddingUnavailable,
    SessionStateError,
)
from .similarity import SimilarityComparator, cosine_similarity
from .quiz import (
    QuestionKind,
    TrueFalse,
    MultipleChoice,
    FillBlank,
    GradedResult,
    parse_questions,
    AnswerGrader,
    QuizSession,
    SessionPhase,
    QuizGenerator,
    GeneratedQuiz,
)
from .agents import ArticleAssistant, ArticleSummary
from .factory import build_grader, build_generator, build_assistant

__all__ = [
    # Config
    "config",
    "Config",
    # Errors
    "QuizError",
    "SchemaError",
    "DataIntegrityError",
    "EmbeddingUnavailable",
    "SessionStateError",
    # Similarity
    "SimilarityComparator",
    "cosine_similarity",
    # Quiz
    "QuestionKind",
    "TrueFalse",
    "MultipleChoice",
    "FillBlank",
    "GradedResult",
    "parse_questions",
    "AnswerGrader",
    "QuizSession",
    "SessionPhase",
    "QuizGenerator",
    "GeneratedQuiz",
    # Assistant
    "ArticleAssistant",
    "ArticleSummary",
    # Wiring
    "build_grader",
    "build_generator",
    "build_assistant",
]
