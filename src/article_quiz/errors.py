"""
Exception types for the quiz core

Provider errors live in article_quiz.providers.base; everything raised by
the quiz pipeline itself derives from QuizError.
"""


class QuizError(Exception):
    """Base exception for quiz errors."""
    pass


class SchemaError(QuizError, ValueError):
    """LLM payload does not match the expected question schema."""
    pass


class DataIntegrityError(QuizError, ValueError):
    """A well-typed question record violates a data invariant."""
    pass


class EmbeddingUnavailable(QuizError):
    """An embedding could not be computed for a piece of text."""
    pass


class SessionStateError(QuizError, RuntimeError):
    """A session operation was called from the wrong phase."""
    pass
