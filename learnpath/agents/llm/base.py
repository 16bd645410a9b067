## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMError(RuntimeError):
    """Raised when the provider call itself fails (transport, auth, quota)."""


class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        raise NotImplementedError
