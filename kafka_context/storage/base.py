"""Abstract base class for context storage."""

from abc import ABC, abstractmethod
from kafka_context.models.context import ConfigurationStore


class ContextStorage(ABC):
    """Abstract interface for persisting the configuration store."""

    @abstractmethod
    def load(self) -> ConfigurationStore:
        """Load the stored contexts."""
        pass

    @abstractmethod
    def save(self, store: ConfigurationStore) -> None:
        """Persist the stored contexts, replacing what was there."""
        pass
