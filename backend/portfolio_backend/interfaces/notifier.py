from abc import ABC, abstractmethod
from typing import Optional


class INotifier(ABC):

    @abstractmethod
    async def notify(self, name: str, email: str, about: Optional[str], prompt: str) -> str:
        """Send one notification and return the transport's message id."""
        pass
