"""Base data structures for the assertion system."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single assertion.

    Attributes:
        name: Identifier for the assertion (e.g. "file_exists:Dockerfile").
        passed: Whether the condition held.
        message: Human-readable label printed next to the pass/fail glyph.
    """

    name: str
    passed: bool
    message: str
