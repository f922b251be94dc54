"""
Answer grading

Applies the per-kind comparison policy: exact text for true/false and
multiple choice, embedding similarity for fill-in-the-blank.
"""

import logging
from typing import Mapping, Optional, Sequence

from ..similarity import SimilarityComparator, DEFAULT_THRESHOLD
from .schema import (
    AnswerValue,
    FillBlank,
    GradedResult,
    MultipleChoice,
    Question,
    TrueFalse,
    render_bool,
)

logger = logging.getLogger(__name__)

QUESTION_CLASSES = (TrueFalse, MultipleChoice, FillBlank)


def render_answer(value: Optional[AnswerValue]) -> str:
    """Display text for a user answer; unanswered renders as ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return render_bool(value)
    return str(value)


class AnswerGrader:
    """
    Grades user answers against stored answers.

    Grading is pure: the same question and answer always give the same
    GradedResult, and nothing is raised for any input. An object that is not
    one of the three question types grades as incorrect.
    """

    def __init__(self, comparator: SimilarityComparator, threshold: float = DEFAULT_THRESHOLD):
        """
        Initialize grader.

        Args:
            comparator: Similarity comparator for free-text answers
            threshold: Minimum similarity for a fill-in-the-blank answer
        """
        self.comparator = comparator
        self.threshold = threshold

    def grade(self, question: Question, user_answer: Optional[AnswerValue] = None) -> GradedResult:
        """Grade one answer (None means unanswered)."""
        given = render_answer(user_answer)

        if not isinstance(question, QUESTION_CLASSES):
            logger.warning(f"Cannot grade {type(question).__name__}; marking incorrect")
            return GradedResult(
                question=str(getattr(question, "question", question)),
                correct_answer="",
                user_answer=given,
                is_correct=False,
            )

        expected = question.correct_text
        if isinstance(question, FillBlank):
            is_correct = bool(given.strip()) and self.comparator.is_equivalent(
                given.lower(), expected.lower(), threshold=self.threshold
            )
        else:
            is_correct = given == expected

        return GradedResult(
            question=question.question,
            correct_answer=expected,
            user_answer=given,
            is_correct=is_correct,
        )

    def grade_all(
        self,
        questions: Sequence[Question],
        answers: Mapping[int, AnswerValue],
    ) -> list:
        """Grade every question in order, looking answers up by position."""
        return [self.grade(q, answers.get(i)) for i, q in enumerate(questions)]
