"""Protocol for text generation backends."""

from typing import Protocol

from ielts_trainer.models.generation import GeneratorResult


class TextGenerator(Protocol):
    """Interface for a service that turns a prompt into text.

    Implementations never raise for transport or service failures; they
    return a ServiceError or Malformed result instead.
    """

    def generate(self, prompt: str) -> GeneratorResult:
        """Submit a prompt and return the outcome.

        Args:
            prompt: Full prompt text

        Returns:
            Ok with the response text, Malformed if the response envelope
            could not be read, or ServiceError if the request failed.
        """
        ...
