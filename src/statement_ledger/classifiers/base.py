from abc import ABC, abstractmethod


class Classifier(ABC):
    @abstractmethod
    def classify(self, description: str) -> str | None:
        """Return a category name for the description, or None if unsure."""
        pass
