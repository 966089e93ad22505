"""Orchestration layer for coordinating services into sessions."""

from .article_session import ArticleSession
from .daily_review import DailyReview
from .vocabulary_session import VocabularySession

__all__ = ["ArticleSession", "DailyReview", "VocabularySession"]
