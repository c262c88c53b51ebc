"""
Abstract base classes defining contracts between modules.

Every module implements one of these interfaces. Orchestration wires them.
"""

from abc import ABC, abstractmethod

from tt_predictor.core.schema import Payload, PlayerHistory, Prediction


class BaseLoader(ABC):
    """Contract: payload source → Payload."""

    @abstractmethod
    def read(self) -> str:
        """Return the raw JSON text of the payload."""
        ...

    @abstractmethod
    def load(self) -> Payload:
        """Return the parsed payload."""
        ...


class BasePredictor(ABC):
    """Contract: two player histories → Prediction."""

    @abstractmethod
    def predict(
        self, history_a: PlayerHistory, history_b: PlayerHistory
    ) -> Prediction:
        ...
