"""
Quiz schema and data structures

Defines the three question shapes an LLM can return, the graded result
record, and the fail-closed parser that turns raw model output into
typed questions.
"""

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from ..errors import DataIntegrityError, SchemaError

logger = logging.getLogger(__name__)

MULTIPLE_CHOICE_OPTIONS = 4


class QuestionKind(str, Enum):
    """Types of quiz questions."""
    TRUE_FALSE = "true_false"
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_BLANK = "fill_blank"


def render_bool(value: bool) -> str:
    """Boolean display text, matching JSON spelling."""
    return "true" if value else "false"


def _field(data: dict, name: str, expected: type) -> Any:
    """Fetch a required field with an exact JSON type."""
    if name not in data:
        raise SchemaError(f"Missing field {name!r}")
    value = data[name]
    # bool is an int subclass; JSON keeps them apart, so do we
    if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
        raise SchemaError(f"Field {name!r} should be {expected.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TrueFalse:
    """A statement the user marks true or false."""
    question: str
    answer: bool

    kind: ClassVar[QuestionKind] = QuestionKind.TRUE_FALSE

    @property
    def correct_text(self) -> str:
        return render_bool(self.answer)

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}

    @classmethod
    def from_dict(cls, data: dict) -> "TrueFalse":
        return cls(
            question=_field(data, "question", str),
            answer=_field(data, "answer", bool),
        )


@dataclass(frozen=True)
class MultipleChoice:
    """
    A question with four options.

    `answer` is a 1-based index into `options`; records that break this
    are rejected at construction with DataIntegrityError.
    """
    question: str
    options: tuple
    answer: int

    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE

    def __post_init__(self):
        # Accept any sequence but store a tuple so the record stays immutable
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) != MULTIPLE_CHOICE_OPTIONS:
            raise DataIntegrityError(
                f"Expected {MULTIPLE_CHOICE_OPTIONS} options, got {len(self.options)}: {self.question!r}"
            )
        if not 1 <= self.answer <= len(self.options):
            raise DataIntegrityError(
                f"Answer {self.answer} outside 1..{len(self.options)}: {self.question!r}"
            )

    @property
    def correct_text(self) -> str:
        return self.options[self.answer - 1]

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "answer": self.answer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MultipleChoice":
        question = _field(data, "question", str)
        options = _field(data, "options", list)
        if not all(isinstance(o, str) for o in options):
            raise SchemaError("Field 'options' should contain only strings")
        answer = _field(data, "answer", int)
        return cls(question=question, options=tuple(options), answer=answer)


@dataclass(frozen=True)
class FillBlank:
    """A sentence with a blank (`__`) and its free-text answer."""
    question: str
    answer: str

    kind: ClassVar[QuestionKind] = QuestionKind.FILL_BLANK

    @property
    def correct_text(self) -> str:
        return self.answer

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}

    @classmethod
    def from_dict(cls, data: dict) -> "FillBlank":
        return cls(
            question=_field(data, "question", str),
            answer=_field(data, "answer", str),
        )


Question = Union[TrueFalse, MultipleChoice, FillBlank]

# User answers: bool for true/false, option text or free text otherwise
AnswerValue = Union[bool, str]

QUESTION_TYPES = {
    QuestionKind.TRUE_FALSE: TrueFalse,
    QuestionKind.MULTIPLE_CHOICE: MultipleChoice,
    QuestionKind.FILL_BLANK: FillBlank,
}


@dataclass(frozen=True)
class GradedResult:
    """Outcome of grading one question."""
    question: str
    correct_answer: str
    user_answer: str
    is_correct: bool

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "correct_answer": self.correct_answer,
            "user_answer": self.user_answer,
            "is_correct": self.is_correct,
        }


# =============================================================================
# PARSING
# =============================================================================

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


def _decode_array(raw_text: str) -> list:
    """
    Decode a JSON array from model output.

    Valid JSON must be an array at the top level. Only text that is not JSON
    at all falls back to a fenced code block, then the outermost [...] span,
    since models often wrap the array in prose. A span inside an object is
    never taken as the batch.

    Raises:
        SchemaError: If no candidate decodes to a JSON array
    """
    text = (raw_text or "").strip()
    if not text:
        raise SchemaError("Empty response")

    candidates = [text]
    fence = _FENCE_RE.search(text)
    if fence:
        candidates.append(fence.group(1).strip())
    array = _ARRAY_RE.search(text)
    if array and "{" not in text[:array.start()]:
        candidates.append(array.group())

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if not isinstance(data, list):
            raise SchemaError(f"Expected a JSON array, got {type(data).__name__}")
        return data

    raise SchemaError("Response is not a JSON array")


def parse_questions(raw_text: str, kind: QuestionKind) -> list:
    """
    Parse an LLM response into questions of one kind.

    Whole-array-or-empty: if the payload is not a JSON array or any element
    fails the schema for `kind`, the whole batch is discarded and an empty
    list is returned. There is no element-by-element salvage. Records that
    are well-typed but break a data invariant (e.g. a multiple-choice answer
    outside its options) are dropped individually.

    Never raises.

    Args:
        raw_text: Verbatim message content from the model
        kind: Which question schema to decode against

    Returns:
        Questions in response order (possibly empty)
    """
    kind = QuestionKind(kind)
    question_type = QUESTION_TYPES[kind]

    questions = []
    try:
        for item in _decode_array(raw_text):
            if not isinstance(item, dict):
                raise SchemaError(f"Expected an object, got {type(item).__name__}")
            try:
                questions.append(question_type.from_dict(item))
            except DataIntegrityError as e:
                logger.warning(f"Dropping {kind.value} question: {e}")
    except SchemaError as e:
        logger.warning(f"Discarding {kind.value} batch: {e}")
        return []

    logger.debug(f"Parsed {len(questions)} {kind.value} questions")
    return questions
