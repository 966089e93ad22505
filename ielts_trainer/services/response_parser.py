"""Decode structured generator output into models.

Every decoder takes the raw response text and returns either Ok with the
decoded value or Malformed describing why the text was unusable. Invalid
JSON is an expected outcome here, not an error.
"""

import json
import logging
from typing import Any

from ielts_trainer.models import Malformed, Ok, VocabularyWord
from ielts_trainer.utils import (
    clean_sentence,
    remove_markdown_formatting,
    remove_markdown_keep_paragraphs,
    strip_code_fence,
)

logger = logging.getLogger(__name__)


def decode_json(text: str | None) -> Ok | Malformed:
    """Parse a JSON payload, tolerating markdown code fences."""
    payload = strip_code_fence(text)
    if not payload:
        return Malformed(text or "", "empty response")
    try:
        return Ok(json.loads(payload))
    except json.JSONDecodeError as e:
        return Malformed(text or "", f"invalid JSON: {e.msg}")


def decode_word_list(text: str | None) -> Ok | Malformed:
    """Decode a JSON array of word objects into VocabularyWord items.

    Items that are not objects are skipped. Field names are matched
    case-insensitively. Sentences have emphasis markup removed.
    """
    decoded = decode_json(text)
    if isinstance(decoded, Malformed):
        return decoded
    if not isinstance(decoded.value, list):
        return Malformed(text or "", "expected a JSON array")

    words: list[VocabularyWord] = []
    for item in decoded.value:
        if not isinstance(item, dict):
            logger.debug(f"Skipping non-object word entry: {item!r}")
            continue
        fields = _lower_keys(item)
        words.append(
            VocabularyWord(
                word=_as_text(fields.get("word")).strip(),
                phonetics=_as_text(fields.get("phonetics")).strip(),
                definition=remove_markdown_formatting(_as_text(fields.get("definition"))),
                sentence=clean_sentence(_as_text(fields.get("sentence"))),
            )
        )
    return Ok(words)


def decode_sentence_map(text: str | None) -> Ok | Malformed:
    """Decode a JSON object mapping words to sentences.

    Non-string values are dropped so that callers fall back for them.
    """
    decoded = decode_json(text)
    if isinstance(decoded, Malformed):
        return decoded
    if not isinstance(decoded.value, dict):
        return Malformed(text or "", "expected a JSON object")

    return Ok({str(key): value for key, value in decoded.value.items() if isinstance(value, str)})


def decode_article(text: str | None) -> Ok | Malformed:
    """Decode an article object into a (title, content) tuple."""
    decoded = decode_json(text)
    if isinstance(decoded, Malformed):
        return decoded
    if not isinstance(decoded.value, dict):
        return Malformed(text or "", "expected a JSON object")

    fields = _lower_keys(decoded.value)
    title = fields.get("title")
    content = fields.get("content")
    if not isinstance(title, str) or not isinstance(content, str):
        return Malformed(text or "", "missing title or content")

    return Ok((remove_markdown_formatting(title), remove_markdown_keep_paragraphs(content)))


def decode_evaluations(text: str | None) -> Ok | Malformed:
    """Decode translation evaluations into (score, corrected, explanation) tuples."""
    decoded = decode_json(text)
    if isinstance(decoded, Malformed):
        return decoded
    if not isinstance(decoded.value, list):
        return Malformed(text or "", "expected a JSON array")

    evaluations: list[tuple[int, str, str]] = []
    for item in decoded.value:
        if not isinstance(item, dict):
            return Malformed(text or "", "evaluation entry is not an object")
        fields = _lower_keys(item)
        try:
            score = int(fields.get("score", 0))
        except (TypeError, ValueError):
            return Malformed(text or "", f"invalid score: {fields.get('score')!r}")
        evaluations.append(
            (
                min(max(score, 0), 10),
                remove_markdown_formatting(_as_text(fields.get("correctedtranslation"))),
                remove_markdown_formatting(_as_text(fields.get("explanation"))),
            )
        )
    return Ok(evaluations)


def _lower_keys(data: dict[str, Any]) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
