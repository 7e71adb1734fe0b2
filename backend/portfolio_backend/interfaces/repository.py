from abc import ABC, abstractmethod
from typing import List, Optional

from portfolio_backend.models import Submission


class ISubmissionRepository(ABC):

    @abstractmethod
    async def init_db(self) -> None:
        pass

    @abstractmethod
    async def insert(self, name: str, email: str, about: Optional[str], prompt: str) -> int:
        pass

    @abstractmethod
    async def list_all(self) -> List[Submission]:
        pass
