from abc import ABC, abstractmethod
from typing import Any, Dict

from ..schemas import TransportResponse


class Transport(ABC):
    @abstractmethod
    def get(self, target: str, options: Dict[str, Any]) -> TransportResponse:
        """Issue one GET. Raise TransportError when no response arrives."""
        pass

    def close(self) -> None:
        return None
