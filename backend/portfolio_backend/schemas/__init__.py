from portfolio_backend.schemas.submission import SubmissionCreate, SubmissionResponse

__all__ = ["SubmissionCreate", "SubmissionResponse"]
