"""
Quiz generator

Asks the model for each question kind in parallel and parses the replies.
Each kind fails independently: a provider error, a cancelled call or an
unparseable reply leaves that kind empty without affecting the others.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..agents.prompts import format_question_system_prompt
from ..config import GenerationConfig
from ..providers.base import ModelProvider, ProviderError
from .grader import AnswerGrader
from .schema import QuestionKind, parse_questions
from .session import QuizSession

logger = logging.getLogger(__name__)


@dataclass
class UsageStats:
    """Token usage across generation calls."""
    input_tokens: int = 0
    output_tokens: int = 0
    calls: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def add(self, input_tokens: int, output_tokens: int):
        """Add token counts from an API call."""
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens
        self.calls += 1

    def to_dict(self) -> dict:
        return {
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "total_tokens": self.total_tokens,
            "calls": self.calls,
        }


@dataclass
class GeneratedQuiz:
    """Questions generated for one article, grouped by kind."""
    true_false: list = field(default_factory=list)
    multiple_choice: list = field(default_factory=list)
    fill_blank: list = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.true_false) + len(self.multiple_choice) + len(self.fill_blank)

    def by_kind(self, kind: QuestionKind) -> list:
        return {
            QuestionKind.TRUE_FALSE: self.true_false,
            QuestionKind.MULTIPLE_CHOICE: self.multiple_choice,
            QuestionKind.FILL_BLANK: self.fill_blank,
        }[QuestionKind(kind)]

    def to_dict(self) -> dict:
        return {
            kind.value: [q.to_dict() for q in self.by_kind(kind)]
            for kind in QuestionKind
        }

    def to_session(self, grader: AnswerGrader) -> QuizSession:
        """Start a new session over these questions."""
        return QuizSession(
            true_false=self.true_false,
            multiple_choice=self.multiple_choice,
            fill_blank=self.fill_blank,
            grader=grader,
        )


class QuizGenerator:
    """
    Generates quizzes from article text.

    One chat completion per question kind: the kind's system prompt plus
    the article text as the user message.
    """

    def __init__(
        self,
        provider: ModelProvider,
        model: Optional[str] = None,
        settings: Optional[GenerationConfig] = None,
    ):
        """
        Initialize generator.

        Args:
            provider: AI model provider
            model: Optional model override
            settings: Sampling settings (defaults to GenerationConfig())
        """
        self.provider = provider
        self.model = model
        self.settings = settings or GenerationConfig()
        self.usage = UsageStats()

    async def generate_questions(self, text: str, kind: QuestionKind) -> list:
        """
        Generate and parse questions of one kind.

        Returns an empty list when the call fails or the reply does not parse.
        """
        kind = QuestionKind(kind)

        try:
            response = await self.provider.generate(
                prompt=text,
                system=format_question_system_prompt(kind, self.settings.min_questions),
                model=self.model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except ProviderError as e:
            logger.warning(f"Generating {kind.value} questions failed: {e}")
            return []

        self.usage.add(response.input_tokens, response.output_tokens)
        questions = parse_questions(response.content, kind)
        logger.debug(f"Generated {len(questions)} {kind.value} questions")
        return questions

    async def generate_quiz(self, text: str) -> GeneratedQuiz:
        """
        Generate all three kinds concurrently.

        Waits for every call to settle; none is cancelled because another
        failed.
        """
        kinds = list(QuestionKind)
        outcomes = await asyncio.gather(
            *[self.generate_questions(text, kind) for kind in kinds],
            return_exceptions=True,
        )

        quiz = GeneratedQuiz()
        for kind, outcome in zip(kinds, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(f"Generating {kind.value} questions did not complete: {outcome!r}")
                outcome = []
            quiz.by_kind(kind).extend(outcome)

        logger.info(
            f"Generated quiz with {quiz.total} questions "
            f"({len(quiz.true_false)} true/false, {len(quiz.multiple_choice)} multiple choice, "
            f"{len(quiz.fill_blank)} fill in the blank)"
        )
        return quiz
