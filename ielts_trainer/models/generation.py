"""Outcome types for calls to the text generator."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    """A usable result (response text, or decoded data)."""

    value: Any


@dataclass(frozen=True)
class Malformed:
    """The service answered, but the content could not be decoded."""

    raw_text: str
    reason: str = ""

    def __str__(self) -> str:
        return f"Malformed response ({self.reason})" if self.reason else "Malformed response"


@dataclass(frozen=True)
class ServiceError:
    """The request failed (HTTP error, timeout, network error)."""

    code: int | None
    body: str

    def __str__(self) -> str:
        if self.code is None:
            return f"Service error: {self.body}"
        return f"Service error {self.code}: {self.body}"


GeneratorResult = Union[Ok, Malformed, ServiceError]
