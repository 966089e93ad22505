"""Utility functions for IELTS Trainer."""

from .file_utils import ensure_directory, unique_file_path
from .text_utils import (
    clean_sentence,
    normalize_text,
    remove_markdown_formatting,
    remove_markdown_keep_paragraphs,
    strip_code_fence,
)

__all__ = [
    "ensure_directory",
    "unique_file_path",
    "clean_sentence",
    "normalize_text",
    "remove_markdown_formatting",
    "remove_markdown_keep_paragraphs",
    "strip_code_fence",
]
