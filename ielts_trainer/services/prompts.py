"""Prompt templates sent to the text generator."""

import json
from collections.abc import Collection

NO_MARKDOWN_RULE = (
    "Do NOT use markdown formatting (no **, no *, no bold, no italic). Use plain text only."
)

WORD_EXAMPLE = """[
  {
    "word": "ubiquitous",
    "phonetics": "/juˈbɪkwɪtəs/",
    "definition": "adj. 普遍存在的；无所不在的",
    "sentence": "The company's logo has become ubiquitous all over the world."
  },
  {
    "word": "mitigate",
    "phonetics": "/ˈmɪtɪˌɡeɪt/",
    "definition": "v. 减轻；缓解",
    "sentence": "Governments must take action to mitigate the effects of climate change."
  }
]"""

HINT_SAMPLE_SIZE = 30


def avoid_repetition_hint(used_words: Collection[str], sample_size: int = HINT_SAMPLE_SIZE) -> str:
    """Build the "do not reuse these words" paragraph.

    Args:
        used_words: Normalized words already seen
        sample_size: Maximum number of words to list

    Returns:
        Hint text, or "" when there is nothing to avoid
    """
    if not used_words:
        return ""

    sample = sorted(used_words)[:sample_size]
    lines = [
        "",
        "IMPORTANT - AVOID REPETITION:",
        "The following words have already been used. Please DO NOT use them:",
        ", ".join(sample),
    ]
    if len(used_words) > sample_size:
        lines.append(f"(And {len(used_words) - sample_size} more words)")
    lines.append("Please select COMPLETELY DIFFERENT words.")
    return "\n".join(lines)


def word_batch_prompt(count: int, topics: list[str], hint: str = "") -> str:
    """Ask for ``count`` IELTS words with phonetics, definition and sentence."""
    return f"""
You are an IELTS vocabulary expert. Please provide {count} IELTS core vocabulary words from the following topics: {", ".join(topics)}.

CRITICAL REQUIREMENTS:
1. Return EXACTLY {count} words (or as close as possible).
2. Select words commonly tested in IELTS examinations (band 6.5-8.0 level).
3. Ensure diversity in parts of speech (nouns, verbs, adjectives, adverbs, etc.).
4. Each word must be relevant to the given topics.
5. For each word, provide:
   - Accurate phonetics in American English pronunciation (IPA format, US pronunciation)
   - Chinese definition (including part of speech and comprehensive meaning)
   - A unique, natural example sentence that clearly demonstrates the word's usage
6. All example sentences must be unique and creative.
7. {NO_MARKDOWN_RULE}
8. In example sentences, write the vocabulary word naturally without any special formatting or emphasis.
{hint}

Return the response as a valid JSON array. Each object must have: "word", "phonetics", "definition", "sentence".

Example format:
{WORD_EXAMPLE}

Return the JSON array now:"""


def review_sentences_prompt(words: list[str]) -> str:
    """Ask for one new example sentence per word, as a JSON object."""
    quoted = ", ".join(json.dumps(word, ensure_ascii=False) for word in words)
    return f"""
Please generate NEW, DIFFERENT example sentences for the following IELTS vocabulary words.

For each word, provide a sentence that:
1. Clearly demonstrates the word's meaning and usage
2. Is natural and appropriate for IELTS level
3. Uses American English
4. {NO_MARKDOWN_RULE}

Words: {quoted}

Return the response as a valid JSON object where each key is a word exactly as given and each value is the example sentence.

Example format:
{{
  "ubiquitous": "The company's logo has become ubiquitous all over the world.",
  "mitigate": "Governments must take action to mitigate the effects of climate change."
}}

Return the JSON object now:"""


def evaluation_prompt(pairs: list[dict[str, str]]) -> str:
    """Ask for a score, corrected translation and explanation per sentence."""
    return f"""
Please evaluate the following list of Chinese translations for the given English sentences.
For each sentence, provide a score from 1 to 10, a corrected Chinese translation, and a brief explanation for the score.
The input is a JSON array of objects, each containing the original sentence and the user's translation.
Return a valid JSON array of objects in the same order as the input. Each object must have the keys: "score", "correctedTranslation", "explanation".
{NO_MARKDOWN_RULE}

Input:
{json.dumps(pairs, ensure_ascii=False)}

Example output format:
[
  {{
    "score": 8,
    "correctedTranslation": "这家公司的标志在世界各地已经无处不在。",
    "explanation": "翻译准确，但'变得'可以省略，使句子更简洁。"
  }}
]"""


def translation_prompt(sentence: str) -> str:
    """Ask for a plain Chinese translation of one sentence."""
    return f"""
Please provide a correct and natural Chinese translation for the following English sentence.
Return only the Chinese translation, without any additional text, explanation, or formatting.

English sentence:
{sentence}

Chinese translation:"""


def article_prompt(topic: str) -> str:
    """Ask for a 500-1000 word IELTS article as a JSON object."""
    return f"""
Please write a comprehensive IELTS-level English article about the topic: "{topic}".

Requirements:
1. The article should be 500-1000 words long.
2. The article should have a clear title.
3. The article should be well-structured with paragraphs.
4. Use appropriate IELTS-level vocabulary and expressions.
5. The content should be informative and engaging.
6. {NO_MARKDOWN_RULE}

Return the response as a valid JSON object with the following keys:
- "title": the article title (in English)
- "content": the full article text (in English, preserve paragraph breaks with \\n)

Example format:
{{
  "title": "The Impact of Climate Change on Natural Geography",
  "content": "Climate change has become one of the most pressing issues of our time...\\n\\nIn conclusion..."
}}"""


def article_translation_prompt(content: str) -> str:
    """Ask for a Chinese translation of a full article."""
    return f"""
Please translate the following English article into Chinese.
Preserve the paragraph structure.
Return only the Chinese translation, without any additional text or formatting.

Article:
{content}"""


def key_words_prompt(content: str, count: int) -> str:
    """Ask for ``count`` key vocabulary words taken from an article."""
    return f"""
Please extract {count} key vocabulary words from the following article that are important for IELTS learners.

For each word, provide:
- Accurate phonetics in American English pronunciation (IPA format, US pronunciation)
- Chinese definition (including part of speech and comprehensive meaning)
- An example sentence from the article or a similar context

{NO_MARKDOWN_RULE} Do NOT highlight the vocabulary word in the sentence.

Return the response as a valid JSON array. Each object in the array must have the following keys: "word", "phonetics", "definition", "sentence".

Article:
{content}

Example format:
{WORD_EXAMPLE}"""
