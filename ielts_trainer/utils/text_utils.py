"""Text processing utilities."""

import re

# Punctuation removed when building comparison keys
_KEY_PUNCTUATION = ".,!?;:\"'()[]{}"
_KEY_TRANSLATION = str.maketrans("", "", _KEY_PUNCTUATION)

_BOLD_STARS = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_STAR = re.compile(r"(?<!\*)\*([^*\s]+)\*(?!\*)")
_BOLD_UNDERSCORES = re.compile(r"__([^_]+)__")
_ITALIC_UNDERSCORE = re.compile(r"(?<!_)_([^_\s]+)_(?!_)")


def normalize_text(text: str | None) -> str:
    """Build the comparison key for a word or sentence.

    Lowercases, strips common punctuation and collapses whitespace, so
    "Ubiquitous!" and " ubiquitous" produce the same key.

    Args:
        text: Word or sentence (None is treated as empty)

    Returns:
        Normalized key, or "" for blank input
    """
    if not text:
        return ""
    lowered = text.lower().translate(_KEY_TRANSLATION)
    return " ".join(lowered.split())


def remove_markdown_formatting(text: str | None) -> str:
    """Remove bold/italic markdown markers and collapse whitespace.

    Handles **word**, *word*, __word__ and _word_. A lone asterisk or
    underscore that does not wrap a word is left alone.

    Args:
        text: Text that may contain emphasis markup

    Returns:
        Plain text
    """
    if not text or not text.strip():
        return ""

    cleaned = _BOLD_STARS.sub(r"\1", text)
    cleaned = _ITALIC_STAR.sub(r"\1", cleaned)
    cleaned = _BOLD_UNDERSCORES.sub(r"\1", cleaned)
    cleaned = _ITALIC_UNDERSCORE.sub(r"\1", cleaned)

    return " ".join(cleaned.split())


def remove_markdown_keep_paragraphs(text: str | None) -> str:
    """Remove emphasis markup line by line, keeping paragraph breaks.

    Args:
        text: Multi-paragraph text

    Returns:
        Text with markup removed and one blank line between paragraphs
    """
    if not text or not text.strip():
        return ""
    lines = [remove_markdown_formatting(line) for line in text.splitlines()]
    return "\n\n".join(line for line in lines if line)


def clean_sentence(sentence: str | None) -> str:
    """Clean an example sentence returned by the generator."""
    return remove_markdown_formatting(sentence)


def strip_code_fence(text: str | None) -> str:
    """Remove markdown code fences around a JSON payload.

    Args:
        text: Raw generator output, e.g. "```json\\n[...]\\n```"

    Returns:
        The payload without fences, stripped of surrounding whitespace
    """
    if not text:
        return ""

    cleaned = text.strip()
    if cleaned.lower().startswith("```json"):
        cleaned = cleaned[7:].lstrip()
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:].lstrip()

    if cleaned.endswith("```"):
        cleaned = cleaned[:-3].rstrip()

    return cleaned.strip()
