from portfolio_backend.repositories.submission_repository import SubmissionRepository
from portfolio_backend.repositories.unavailable_repository import UnavailableRepository

__all__ = ["SubmissionRepository", "UnavailableRepository"]
