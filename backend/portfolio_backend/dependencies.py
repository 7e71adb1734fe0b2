from fastapi import Request

from portfolio_backend.config import Settings
from portfolio_backend.interfaces.notifier import INotifier
from portfolio_backend.interfaces.repository import ISubmissionRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> ISubmissionRepository:
    """Dependency for the shared submission repository"""
    return request.app.state.repository


def get_notifier(request: Request) -> INotifier:
    """Dependency for the shared email notifier"""
    return request.app.state.notifier
