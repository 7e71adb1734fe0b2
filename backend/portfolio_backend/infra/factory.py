
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from portfolio_backend.config import Settings
from portfolio_backend.database import create_engine
from portfolio_backend.errors import StorageError
from portfolio_backend.interfaces.notifier import INotifier
from portfolio_backend.interfaces.repository import ISubmissionRepository
from portfolio_backend.notifications.email_notifier import EmailNotifier
from portfolio_backend.repositories import SubmissionRepository

logger = logging.getLogger(__name__)


class Factory:
    _repository: Optional[ISubmissionRepository] = None
    _notifier: Optional[INotifier] = None

    @staticmethod
    def get_repository(settings: Settings) -> ISubmissionRepository:
        if Factory._repository is None:
            try:
                engine = create_engine(settings)
            except (SQLAlchemyError, ValueError, ImportError) as e:
                # Unparseable URL, unknown dialect or missing driver
                raise StorageError(f"Could not create database engine: {e}") from e
            Factory._repository = SubmissionRepository(engine)
            logger.info("Database engine created")
        return Factory._repository

    @staticmethod
    def get_notifier(settings: Settings) -> INotifier:
        if Factory._notifier is None:
            if not settings.email_receiver:
                logger.warning("EMAIL_RECEIVER is not set; notification emails will be rejected")
            Factory._notifier = EmailNotifier(
                hostname=settings.email_host,
                port=settings.email_port,
                username=settings.email_user,
                password=settings.email_pass,
                receiver=settings.email_receiver,
            )
        return Factory._notifier

    @staticmethod
    def reset() -> None:
        Factory._repository = None
        Factory._notifier = None
