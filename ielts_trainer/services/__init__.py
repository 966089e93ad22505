"""Business logic services for IELTS Trainer."""

from .article_service import ArticleService
from .gemini_client import GeminiClient
from .report_service import ReportService
from .review_sentence_batcher import ReviewSentenceBatcher
from .translation_evaluator import TranslationEvaluator
from .usage_store import UsageStore
from .validation_service import ValidationService
from .word_selector import WordSelector

__all__ = [
    "ArticleService",
    "GeminiClient",
    "ReportService",
    "ReviewSentenceBatcher",
    "TranslationEvaluator",
    "UsageStore",
    "ValidationService",
    "WordSelector",
]
