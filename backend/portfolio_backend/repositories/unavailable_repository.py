from typing import List, Optional

from portfolio_backend.errors import StorageError
from portfolio_backend.interfaces.repository import ISubmissionRepository
from portfolio_backend.models import Submission


class UnavailableRepository(ISubmissionRepository):
    """Stands in when no engine could be created; every call is a storage error."""

    def __init__(self, reason: str):
        self.reason = reason

    async def init_db(self) -> None:
        raise StorageError(f"Database unavailable: {self.reason}")

    async def insert(self, name: str, email: str, about: Optional[str], prompt: str) -> int:
        raise StorageError(f"Database unavailable: {self.reason}")

    async def list_all(self) -> List[Submission]:
        raise StorageError(f"Database unavailable: {self.reason}")
