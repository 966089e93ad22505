"""Generate the daily reading article."""

import logging
import random

from ielts_trainer.interfaces import ProgressCallback, TextGenerator
from ielts_trainer.models import Article, Ok
from ielts_trainer.utils import remove_markdown_keep_paragraphs

from .prompts import article_prompt, article_translation_prompt, key_words_prompt
from .response_parser import decode_article, decode_word_list

logger = logging.getLogger(__name__)


class ArticleService:
    """Build an article, its translation and its key words (stateless service)."""

    TOTAL_STEPS = 4

    def __init__(self, generator: TextGenerator, rng: random.Random | None = None):
        """Initialize the article service.

        Args:
            generator: Text generator used for every step
            rng: Random source for topic choice (seed it in tests)
        """
        self.generator = generator
        self.rng = rng or random.Random()

    def generate_daily_article(
        self,
        topics: list[str],
        key_words_count: int,
        progress_callback: ProgressCallback | None = None,
    ) -> Article:
        """Generate an article about a randomly chosen topic.

        Steps: article body, Chinese translation, key words. If the body
        cannot be generated the remaining steps are skipped and the returned
        article has no content.

        Args:
            topics: Candidate topics (one is chosen at random)
            key_words_count: Number of key words to extract
            progress_callback: Optional callback for progress reporting

        Returns:
            Article (check ``has_content``)
        """
        topic = self.rng.choice(topics)
        article = Article(topic=topic)

        if progress_callback:
            progress_callback.on_start(self.TOTAL_STEPS, f"Generating article about {topic}")
            progress_callback.on_progress(1, "Writing article")

        outcome = self.generator.generate(article_prompt(topic))
        decoded = decode_article(outcome.value) if isinstance(outcome, Ok) else outcome
        if not isinstance(decoded, Ok):
            logger.warning(f"Article generation failed: {decoded}")
            if progress_callback:
                progress_callback.on_error("Writing article", str(decoded))
            return article

        article.title, article.content = decoded.value
        if not article.has_content:
            if progress_callback:
                progress_callback.on_error("Writing article", "empty article")
            return article

        if progress_callback:
            progress_callback.on_progress(2, "Translating article")
        translation = self.generator.generate(article_translation_prompt(article.content))
        if isinstance(translation, Ok):
            article.translation = remove_markdown_keep_paragraphs(translation.value)
        else:
            logger.warning(f"Article translation failed: {translation}")
            if progress_callback:
                progress_callback.on_error("Translating article", str(translation))

        if progress_callback:
            progress_callback.on_progress(3, "Extracting key words")
        key_words = self.generator.generate(key_words_prompt(article.content, key_words_count))
        decoded_words = (
            decode_word_list(key_words.value) if isinstance(key_words, Ok) else key_words
        )
        if isinstance(decoded_words, Ok):
            article.key_words = [w for w in decoded_words.value if w.word][:key_words_count]
        else:
            logger.warning(f"Key word extraction failed: {decoded_words}")
            if progress_callback:
                progress_callback.on_error("Extracting key words", str(decoded_words))

        if progress_callback:
            progress_callback.on_progress(4, "Done")
            progress_callback.on_complete()

        return article
