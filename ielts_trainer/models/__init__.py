"""Data models for IELTS Trainer."""

from .article import Article
from .generation import GeneratorResult, Malformed, Ok, ServiceError
from .review import ReviewItem
from .selection import SelectionResult
from .usage import DATE_KEY_FORMAT, UsageRecord, WordLearningRecord, date_key
from .validation import ValidationIssue, ValidationResult
from .word import VocabularyWord

__all__ = [
    "Article",
    "GeneratorResult",
    "Ok",
    "Malformed",
    "ServiceError",
    "ReviewItem",
    "SelectionResult",
    "DATE_KEY_FORMAT",
    "UsageRecord",
    "WordLearningRecord",
    "date_key",
    "ValidationIssue",
    "ValidationResult",
    "VocabularyWord",
]
