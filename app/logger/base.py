"""Logger interface.

Implementations accept a message plus arbitrary keyword arguments, which are
treated as structured fields rather than format arguments.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logger used throughout the application."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        ...
