"""
Quiz system for article-quiz

Question schema and parsing, answer grading, the session state machine
and LLM-backed quiz generation.
"""

from .schema import (
    QuestionKind,
    TrueFalse,
    MultipleChoice,
    FillBlank,
    Question,
    AnswerValue,
    GradedResult,
    parse_questions,
)
from .grader import AnswerGrader
from .session import QuizSession, SessionPhase
from .generator import QuizGenerator, GeneratedQuiz, UsageStats

__all__ = [
    "QuestionKind",
    "TrueFalse",
    "MultipleChoice",
    "FillBlank",
    "Question",
    "AnswerValue",
    "GradedResult",
    "parse_questions",
    "AnswerGrader",
    "QuizSession",
    "SessionPhase",
    "QuizGenerator",
    "GeneratedQuiz",
    "UsageStats",
]
