"""
IELTS Trainer - Console IELTS Vocabulary and Reading Trainer

Generates vocabulary translation quizzes, daily reading articles and
review reports with the Gemini API, and renders the results as HTML.
"""

__version__ = "1.2.0"
__author__ = "IELTS Trainer Contributors"
