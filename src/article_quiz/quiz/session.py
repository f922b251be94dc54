"""
Quiz session state machine

Sequences true/false, multiple-choice and fill-in-the-blank questions,
collects answers, and grades them when the quiz is handed in.

    START --begin--> IN_PROGRESS(0)
    IN_PROGRESS(i) --next--> IN_PROGRESS(i+1) | RESULT (after the last question)
    IN_PROGRESS(i) --previous--> IN_PROGRESS(i-1) | START (from the first question)
    IN_PROGRESS(i) --submit--> RESULT
    any --reset--> START
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from ..errors import SessionStateError
from .grader import AnswerGrader
from .schema import AnswerValue, Question

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Phase of a quiz session."""
    START = "start"
    IN_PROGRESS = "in_progress"
    RESULT = "result"


class QuizSession:
    """
    One attempt (or several, via reset) at a fixed set of questions.

    The question lists are owned by the session and never change; answers
    and results belong to the current attempt. Not meant to be shared
    between concurrent callers.
    """

    def __init__(
        self,
        true_false: Sequence[Question],
        multiple_choice: Sequence[Question],
        fill_blank: Sequence[Question],
        grader: AnswerGrader,
    ):
        self.true_false = tuple(true_false)
        self.multiple_choice = tuple(multiple_choice)
        self.fill_blank = tuple(fill_blank)
        self.all_questions = self.true_false + self.multiple_choice + self.fill_blank
        self.grader = grader

        self._phase = SessionPhase.START
        self._index = 0
        self._answers: dict = {}
        self._results: list = []

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def index(self) -> int:
        """Current position; only meaningful while in progress."""
        return self._index

    @property
    def total(self) -> int:
        return len(self.all_questions)

    @property
    def answers(self) -> dict:
        """Copy of the answers recorded so far, keyed by position."""
        return dict(self._answers)

    @property
    def current_question(self) -> Optional[Question]:
        if 0 <= self._index < self.total:
            return self.all_questions[self._index]
        return None

    @property
    def current_answer(self) -> Optional[AnswerValue]:
        return self._answers.get(self._index)

    @property
    def is_last_question(self) -> bool:
        return self._index + 1 >= self.total

    @property
    def results(self) -> list:
        """Graded results in question order (empty until RESULT)."""
        return list(self._results)

    @property
    def score(self) -> Optional[int]:
        """Number of correct answers, or None before the quiz is graded."""
        if self._phase != SessionPhase.RESULT:
            return None
        return sum(1 for r in self._results if r.is_correct)

    def answer_for(self, index: int) -> Optional[AnswerValue]:
        return self._answers.get(index)

    def _require(self, phase: SessionPhase, action: str):
        if self._phase != phase:
            raise SessionStateError(f"Cannot {action} while {self._phase.value}")

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def begin(self):
        """Start a fresh attempt at the first question."""
        self._require(SessionPhase.START, "begin")
        self._index = 0
        self._answers = {}
        self._results = []
        self._phase = SessionPhase.IN_PROGRESS

    def next(self):
        """Advance, or grade and finish after the last question."""
        self._require(SessionPhase.IN_PROGRESS, "go to the next question")
        if self._index + 1 < self.total:
            self._index += 1
        else:
            self._finish()

    def previous(self):
        """Go back a question, or back to the start screen from the first."""
        self._require(SessionPhase.IN_PROGRESS, "go to the previous question")
        if self._index > 0:
            self._index -= 1
        else:
            # Answers survive until the next begin()/reset()
            self._phase = SessionPhase.START

    def submit(self):
        """Hand in now; unanswered questions grade as incorrect."""
        self._require(SessionPhase.IN_PROGRESS, "submit")
        self._finish()

    def reset(self):
        """Return to the start screen with no answers or results."""
        self._phase = SessionPhase.START
        self._index = 0
        self._answers = {}
        self._results = []

    def record_answer(self, index: int, value: AnswerValue):
        """
        Store (or replace) the answer for the question at `index`.

        Any position may be answered, not just the current one.

        Raises:
            SessionStateError: If the quiz is not in progress
            IndexError: If `index` is not a question position
            TypeError: If `value` is not a bool or str
        """
        self._require(SessionPhase.IN_PROGRESS, "record an answer")
        if not 0 <= index < self.total:
            raise IndexError(f"Question index {index} out of range (0..{self.total - 1})")
        if not isinstance(value, (bool, str)):
            raise TypeError(f"Answer must be bool or str, got {type(value).__name__}")
        self._answers[index] = value

    def _finish(self):
        self._results = self.grader.grade_all(self.all_questions, self._answers)
        self._phase = SessionPhase.RESULT
        logger.debug(f"Quiz graded: {self.score}/{self.total} correct")

    def to_dict(self) -> dict:
        """Snapshot for a presentation layer."""
        current = self.current_question if self._phase == SessionPhase.IN_PROGRESS else None
        return {
            "phase": self._phase.value,
            "index": self._index,
            "total": self.total,
            "current_question": (
                self._public_view(current) if current is not None else None
            ),
            "results": [r.to_dict() for r in self._results],
            "score": self.score,
        }

    @staticmethod
    def _public_view(question: Question) -> dict:
        """Question fields a player may see (no stored answer)."""
        view = {"kind": question.kind.value}
        view.update((k, v) for k, v in question.to_dict().items() if k != "answer")
        return view
