"""Result of selecting fresh vocabulary."""

from dataclasses import dataclass, field

from .word import VocabularyWord


@dataclass
class SelectionResult:
    """Words accepted by the selector, and how many were asked for."""

    requested: int
    words: list[VocabularyWord] = field(default_factory=list)

    @property
    def shortfall(self) -> int:
        """Number of requested words that could not be found."""
        return max(self.requested - len(self.words), 0)

    @property
    def is_complete(self) -> bool:
        """Check if every requested word was found."""
        return self.shortfall == 0

    def __len__(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return f"SelectionResult(selected={len(self.words)}, requested={self.requested})"
