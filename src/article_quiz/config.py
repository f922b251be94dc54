"""
article-quiz configuration

Model choices, generation parameters and grading thresholds live here.
Environment variables override defaults for deployment flexibility.
"""

import os
from dataclasses import dataclass, field
from typing import Literal


@dataclass
class ModelConfig:
    """AI model selection"""
    provider: Literal["groq", "openai", "claude", "mock"] = os.getenv("QUIZ_PROVIDER", "groq")
    model: str = os.getenv("QUIZ_MODEL", "")  # Empty = use provider default

    # Default models per provider
    PROVIDER_DEFAULTS = {
        "groq": "llama-3.1-8b-instant",
        "openai": "gpt-4o-mini",
        "claude": "claude-sonnet-4-20250514",
        "mock": "mock-model-v1",
    }

    def get_model(self) -> str:
        """Get the configured model, falling back to the provider default."""
        return self.model or self.PROVIDER_DEFAULTS.get(self.provider, "")


@dataclass
class GenerationConfig:
    """How questions and article metadata are requested"""
    temperature: float = float(os.getenv("QUIZ_TEMPERATURE", "0.2"))
    max_tokens: int = int(os.getenv("QUIZ_MAX_TOKENS", "2048"))
    min_questions: int = int(os.getenv("QUIZ_MIN_QUESTIONS", "5"))  # Asked for, never enforced


@dataclass
class GradingConfig:
    """Free-text answer grading"""
    similarity_threshold: float = float(os.getenv("QUIZ_SIMILARITY_THRESHOLD", "0.65"))
    embedding_provider: Literal["local", "openai", "mock"] = os.getenv("QUIZ_EMBEDDING_PROVIDER", "local")
    embedding_model: str = os.getenv("QUIZ_EMBEDDING_MODEL", "")  # Empty = use provider default


@dataclass
class Config:
    """Master config: import this"""
    models: ModelConfig = field(default_factory=ModelConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    grading: GradingConfig = field(default_factory=GradingConfig)

    @classmethod
    def offline_mode(cls) -> "Config":
        """For development and testing: no network, no model downloads"""
        cfg = cls()
        cfg.models.provider = "mock"
        cfg.models.model = ""
        cfg.grading.embedding_provider = "mock"
        return cfg


# Singleton
config = Config()
