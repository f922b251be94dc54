"""
Mock provider for testing

Returns configurable responses without making API calls.
"""

import asyncio
import json
import random
from dataclasses import dataclass, field
from typing import Optional, List, Callable

from .base import ModelProvider, ModelResponse, ProviderError


SAMPLE_TRUE_FALSE = [
    {"question": "The article was written for testing purposes.", "answer": True},
    {"question": "The article contains no text at all.", "answer": False},
    {"question": "Mock providers make network calls.", "answer": False},
    {"question": "Quizzes can be generated offline with the mock provider.", "answer": True},
    {"question": "Every quiz must contain exactly one question.", "answer": False},
]

SAMPLE_MULTIPLE_CHOICE = [
    {"question": "What is 2 + 2?", "options": ["3", "4", "5", "6"], "answer": 2},
    {"question": "Which colour is the sky on a clear day?", "options": ["Green", "Red", "Blue", "Yellow"], "answer": 3},
    {"question": "How many options does each question have?", "options": ["Four", "Two", "Three", "Five"], "answer": 1},
    {"question": "Which of these is a programming language?", "options": ["HTML", "CSS", "JSON", "Python"], "answer": 4},
    {"question": "What is the capital of France?", "options": ["Berlin", "Paris", "Madrid", "Rome"], "answer": 2},
]

SAMPLE_FILL_BLANK = [
    {"question": "The capital of France is __.", "answer": "Paris"},
    {"question": "Water freezes at __ degrees Celsius.", "answer": "zero"},
    {"question": "The largest planet in the solar system is __.", "answer": "Jupiter"},
    {"question": "A week has __ days.", "answer": "seven"},
    {"question": "The opposite of hot is __.", "answer": "cold"},
]


@dataclass
class MockProvider(ModelProvider):
    """
    Mock provider for testing.

    Can be configured with custom response generators or fixed responses.
    Without either, it looks at the system prompt and answers with sample
    questions of the requested kind.
    """

    _name: str = "mock"
    _default_model: str = "mock-model-v1"
    fixed_response: Optional[str] = None
    response_generator: Optional[Callable[[str, Optional[str]], str]] = None
    delay_seconds: float = 0.0
    fail_rate: float = 0.0  # Probability of raising an error
    token_count: int = 100
    models: List[str] = field(default_factory=lambda: ["mock-model-v1", "mock-model-v2"])
    calls: List[dict] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_model(self) -> str:
        return self._default_model

    async def generate(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.2,
        **kwargs
    ) -> ModelResponse:
        """Generate a mock response."""
        self.calls.append({"prompt": prompt, "system": system, "model": model})

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if self.fail_rate > 0 and random.random() < self.fail_rate:
            raise ProviderError("Simulated mock provider failure")

        if self.fixed_response is not None:
            content = self.fixed_response
        elif self.response_generator is not None:
            content = self.response_generator(prompt, system)
        else:
            content = self._default_response(prompt, system)

        return ModelResponse(
            content=content,
            model=model or self._default_model,
            provider=self.name,
            usage={
                "input_tokens": len(prompt.split()) * 2,
                "output_tokens": self.token_count,
            },
        )

    async def list_models(self) -> List[str]:
        return list(self.models)

    def _default_response(self, prompt: str, system: Optional[str] = None) -> str:
        """Detect the requested task from the system prompt and answer it."""
        system_lower = (system or "").lower()

        if "true/false" in system_lower:
            return json.dumps(SAMPLE_TRUE_FALSE, indent=2)

        if "multiple-choice" in system_lower:
            return json.dumps(SAMPLE_MULTIPLE_CHOICE, indent=2)

        if "fill-in-the-blank" in system_lower:
            return json.dumps(SAMPLE_FILL_BLANK, indent=2)

        # Assistant prompts carry the article after "document:"
        body = prompt.split(":", 1)[-1]

        if "headline" in system_lower:
            words = body.split()[:6]
            return '"' + (" ".join(words) or "Untitled") + '"'

        if "keywords" in system_lower:
            words = [w.strip(".,;:!?\"'").lower() for w in body.split()]
            unique = list(dict.fromkeys(w for w in words if len(w) > 4))
            return ", ".join(unique[:5])

        return json.dumps({
            "message": "Mock response generated",
            "prompt_length": len(prompt),
            "has_system": system is not None,
        }, indent=2)


def create_failing_mock(failing_marker: str) -> MockProvider:
    """Create a mock that fails whenever the system prompt contains a marker."""
    fallback = MockProvider()

    def generator(prompt: str, system: Optional[str]) -> str:
        if failing_marker.lower() in (system or "").lower():
            raise ProviderError(f"Simulated failure for {failing_marker!r}")
        return fallback._default_response(prompt, system)

    return MockProvider(response_generator=generator)
