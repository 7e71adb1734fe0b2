from portfolio_backend.models.submission import Base, Submission

__all__ = ["Base", "Submission"]
