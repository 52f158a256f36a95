from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging


class BaseEcosystem(ABC):
    """How a project's dependencies resolve and how its model files load."""

    def __init__(self, load_timeout: int = 30) -> None:
        self.load_timeout = load_timeout

    @abstractmethod
    def name(self) -> str:
        """Identifier for this ecosystem."""
        ...

    @abstractmethod
    def resolve(self, dependency: str, project_root: Path, logger: logging.Logger) -> str:
        """Locate a dependency by name and return where it resolved.

        Raises an exception when the dependency cannot be resolved.
        """
        ...

    @abstractmethod
    def load(self, path: Path, project_root: Path, logger: logging.Logger) -> bool:
        """Load a model file and report whether its exported value is defined.

        Raises an exception when loading fails; its message is reported.
        """
        ...

    def is_model_file(self, filename: str, extension: str) -> bool:
        return filename.endswith(extension)
