"""Render session results as standalone HTML reports."""

import logging
from datetime import datetime
from html import escape
from pathlib import Path

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.models import Article, ReviewItem, VocabularyWord
from ielts_trainer.utils import ensure_directory, unique_file_path

logger = logging.getLogger(__name__)

STYLE = """
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif; margin: 0; background-color: #f0f2f5; }
.container { max-width: 1100px; margin: 20px auto; padding: 20px; background-color: #fff; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
h1 { color: #1c2a38; text-align: center; }
.subtitle { text-align: center; color: #666; }
.stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 15px; margin: 20px 0; }
.stat-card { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 16px; border-radius: 8px; text-align: center; }
.stat-card h3 { margin: 0 0 8px 0; font-size: 0.9em; opacity: 0.9; }
.stat-card .value { font-size: 1.8em; font-weight: bold; margin: 0; }
table { width: 100%; border-collapse: collapse; margin-top: 20px; }
th, td { padding: 12px 15px; text-align: left; border-bottom: 1px solid #ddd; vertical-align: top; }
th { background-color: #4a6fa5; color: white; }
tr:nth-child(even) { background-color: #f8f9fa; }
.score { font-weight: bold; text-align: center; }
.score-high { color: #28a745; }
.score-medium { color: #e0a800; }
.score-low { color: #dc3545; }
.details { font-size: 0.9em; color: #555; }
.review-sentence { color: #28a745; font-style: italic; }
.article p { line-height: 1.7; }
"""


def score_class(score: int) -> str:
    """CSS class for a 0-10 score: high (>= 8), medium (5-7) or low."""
    if score >= 8:
        return "score-high"
    if score >= 5:
        return "score-medium"
    return "score-low"


class ReportService:
    """Build and write HTML reports (stateless service)."""

    def __init__(self, config: IeltsTrainerConfig):
        """Initialize the report service.

        Args:
            config: Configuration providing the report directory
        """
        self.config = config

    def render_words_report(self, words: list[VocabularyWord]) -> str:
        """Render the vocabulary quiz report."""
        answered = [w for w in words if not w.is_skipped]
        average = sum(w.score for w in answered) / len(answered) if answered else 0.0

        cards = [
            ("Average Score", f"{average:.1f}/10"),
            ("Questions", str(len(words))),
            ("Answered", str(len(answered))),
            ("Skipped", str(len(words) - len(answered))),
            ("High (≥8)", str(sum(1 for w in answered if w.score >= 8))),
            ("Medium (5-7)", str(sum(1 for w in answered if 5 <= w.score < 8))),
            ("Needs Work (<5)", str(sum(1 for w in answered if w.score < 5))),
        ]

        rows = []
        for w in words:
            user_translation = "Skipped" if w.is_skipped else escape(w.user_translation)
            rows.append(
                "<tr>"
                f"<td><div class='details'><strong>{escape(w.word)}</strong> "
                f"{escape(w.phonetics)}</div>"
                f"<div class='details'>{escape(w.definition)}</div>{escape(w.sentence)}</td>"
                f"<td>{user_translation}</td>"
                f"<td><div>{escape(w.corrected_translation)}</div>"
                f"<div class='details'>{escape(w.explanation)}</div></td>"
                f"<td class='score {score_class(w.score)}'>{w.score}/10</td>"
                "</tr>"
            )

        headers = [
            "Word &amp; Sentence",
            "Your Translation",
            "Correction &amp; Explanation",
            "Score",
        ]
        body = self._stats_html(cards) + self._table_html(headers, rows)
        return self._page("IELTS Vocabulary Translation Report", body, self._generated_line())

    def render_article_report(self, article: Article) -> str:
        """Render the daily article with translation and key words."""
        paragraphs = "".join(f"<p>{escape(p)}</p>" for p in article.paragraphs)
        translation = "".join(f"<p>{escape(p)}</p>" for p in article.translation_paragraphs)

        rows = [
            "<tr>"
            f"<td><strong>{escape(w.word)}</strong></td>"
            f"<td>{escape(w.phonetics)}</td>"
            f"<td>{escape(w.definition)}</td>"
            f"<td>{escape(w.sentence)}</td>"
            "</tr>"
            for w in article.key_words
        ]

        body = f"<div class='article'><h2>{escape(article.title)}</h2>{paragraphs}</div>"
        if translation:
            body += f"<div class='article'><h2>中文翻译</h2>{translation}</div>"
        if rows:
            body += "<h2>Key Words</h2>" + self._table_html(
                ["Word", "Phonetics", "Definition", "Example"], rows
            )

        subtitle = f"Topic: {escape(article.topic)} | {self._generated_line()}"
        return self._page("IELTS Daily Article", body, subtitle)

    def render_daily_report(self, day: str, items: list[ReviewItem]) -> str:
        """Render the review report for one day of learning records."""
        records = [item.record for item in items]
        answered = [r for r in records if not r.is_skipped]
        average = sum(r.score for r in answered) / len(answered) if answered else 0.0

        cards = [
            ("Words", str(len(records))),
            ("Average Score", f"{average:.1f}/10"),
            ("Answered", str(len(answered))),
            ("Passed", str(len(records) - len(answered))),
            ("High (≥8)", str(sum(1 for r in answered if r.score >= 8))),
            ("Medium (5-7)", str(sum(1 for r in answered if 5 <= r.score < 8))),
            ("Needs Work (<5)", str(sum(1 for r in records if r.is_skipped or r.score < 5))),
        ]

        rows = []
        for item in items:
            record = item.record
            user_translation = "Pass" if record.is_skipped else escape(record.user_translation)
            rows.append(
                "<tr>"
                f"<td><strong>{escape(record.word)}</strong></td>"
                f"<td>{escape(record.sentence)}</td>"
                f"<td><span class='review-sentence'>{escape(item.review_sentence)}</span></td>"
                f"<td>{user_translation}</td>"
                f"<td>{escape(record.corrected_translation)}</td>"
                f"<td class='score {score_class(record.score)}'>{record.score}/10</td>"
                "</tr>"
            )

        body = self._stats_html(cards) + self._table_html(
            [
                "Word",
                "Original Sentence",
                "Review Sentence",
                "Your Translation",
                "Corrected Translation",
                "Score",
            ],
            rows,
        )
        subtitle = f"Study date: {escape(day)} | {self._generated_line()}"
        return self._page(f"IELTS Daily Review - {escape(day)}", body, subtitle)

    def write_report(self, html: str, prefix: str) -> Path:
        """Write a report into the report directory under a unique name.

        Args:
            html: Rendered report
            prefix: File name prefix, e.g. "IELTS_Report"

        Returns:
            Path of the written file

        Raises:
            OSError: If the file cannot be written
        """
        directory = ensure_directory(self.config.report_dir)
        path = unique_file_path(directory, prefix)
        path.write_text(html, encoding="utf-8")
        logger.info(f"Report written to {path}")
        return path

    @staticmethod
    def _generated_line() -> str:
        return f"Generated {datetime.now():%Y-%m-%d %H:%M:%S}"

    @staticmethod
    def _stats_html(cards: list[tuple[str, str]]) -> str:
        items = "".join(
            f"<div class='stat-card'><h3>{escape(label)}</h3>"
            f"<p class='value'>{escape(value)}</p></div>"
            for label, value in cards
        )
        return f"<div class='stats'>{items}</div>"

    @staticmethod
    def _table_html(headers: list[str], rows: list[str]) -> str:
        head = "".join(f"<th>{h}</th>" for h in headers)
        return f"<table><thead><tr>{head}</tr></thead><tbody>{''.join(rows)}</tbody></table>"

    @staticmethod
    def _page(title: str, body: str, subtitle: str) -> str:
        return (
            "<!DOCTYPE html>\n"
            '<html lang="zh-CN">\n'
            "<head>\n"
            '<meta charset="UTF-8">\n'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f"<title>{title}</title>\n"
            f"<style>{STYLE}</style>\n"
            "</head>\n"
            "<body>\n"
            f"<div class='container'><h1>{title}</h1>"
            f"<p class='subtitle'>{subtitle}</p>{body}</div>\n"
            "</body>\n"
            "</html>\n"
        )
