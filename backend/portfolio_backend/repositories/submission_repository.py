import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from portfolio_backend.database import create_sessionmaker
from portfolio_backend.errors import StorageError
from portfolio_backend.interfaces.repository import ISubmissionRepository
from portfolio_backend.models import Base, Submission

logger = logging.getLogger(__name__)

# asyncpg surfaces refused/dropped connections as OSError, not SQLAlchemyError
STORAGE_EXCEPTIONS = (SQLAlchemyError, OSError)


class SubmissionRepository(ISubmissionRepository):
    """Sole reader and writer of the submissions table."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._sessionmaker = create_sessionmaker(engine)

    async def init_db(self) -> None:
        """Create the submissions table unless it already exists."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except STORAGE_EXCEPTIONS as e:
            raise StorageError(f"Could not initialize database: {e}") from e
        logger.info("Connected to database and submissions table is ready")

    async def insert(self, name: str, email: str, about: Optional[str], prompt: str) -> int:
        submission = Submission(name=name, email=email, about=about, prompt=prompt)
        try:
            async with self._sessionmaker() as session:
                async with session.begin():
                    session.add(submission)
                    await session.flush()
                    submission_id = submission.id
        except STORAGE_EXCEPTIONS as e:
            raise StorageError(f"Could not save submission: {e}") from e
        return submission_id

    async def list_all(self) -> List[Submission]:
        query = select(Submission).order_by(Submission.submission_date.desc())
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except STORAGE_EXCEPTIONS as e:
            raise StorageError(f"Could not list submissions: {e}") from e
