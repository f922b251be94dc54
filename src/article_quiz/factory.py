"""
Wiring from configuration to components

Each builder takes an explicit Config; nothing here reads the singleton
unless the caller passes it in.
"""

from .agents.assistant import ArticleAssistant
from .config import Config
from .embeddings import get_embedding_provider
from .providers import get_provider
from .quiz.generator import QuizGenerator
from .quiz.grader import AnswerGrader
from .similarity import SimilarityComparator


def build_grader(cfg: Config) -> AnswerGrader:
    """Grader backed by the configured embedding provider."""
    kwargs = {}
    if cfg.grading.embedding_model and cfg.grading.embedding_provider != "mock":
        kwargs["model_name"] = cfg.grading.embedding_model
    provider = get_embedding_provider(cfg.grading.embedding_provider, **kwargs)
    comparator = SimilarityComparator(provider, threshold=cfg.grading.similarity_threshold)
    return AnswerGrader(comparator, threshold=cfg.grading.similarity_threshold)


def build_generator(cfg: Config) -> QuizGenerator:
    """Quiz generator for the configured provider and model."""
    provider = get_provider(cfg.models.provider)
    return QuizGenerator(provider, model=cfg.models.get_model(), settings=cfg.generation)


def build_assistant(cfg: Config) -> ArticleAssistant:
    """Article assistant for the configured provider and model."""
    provider = get_provider(cfg.models.provider)
    return ArticleAssistant(provider, model=cfg.models.get_model(), settings=cfg.generation)
