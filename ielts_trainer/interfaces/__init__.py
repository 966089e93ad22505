"""Interface protocols for IELTS Trainer."""

from .presenter import PresenterProtocol
from .progress import ProgressCallback
from .text_generator import TextGenerator

__all__ = ["PresenterProtocol", "ProgressCallback", "TextGenerator"]
