import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from portfolio_backend.config import Settings
from portfolio_backend.errors import StorageError
from portfolio_backend.infra.factory import Factory
from portfolio_backend.interfaces.notifier import INotifier
from portfolio_backend.interfaces.repository import ISubmissionRepository
from portfolio_backend.repositories import UnavailableRepository
from portfolio_backend.routes.pages import router as pages_router
from portfolio_backend.routes.submissions import INVALID_BODY_MESSAGE, router as submissions_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ISubmissionRepository] = None,
    notifier: Optional[INotifier] = None
) -> FastAPI:
    """
    Build the application.

    The repository and notifier are process-wide handles; any that are not
    passed in are built by the Factory when the app starts.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Portfolio Contact API",
        description="Contact form submissions for the portfolio site"
    )
    app.state.settings = settings
    app.state.repository = repository
    app.state.notifier = notifier

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pages_router)
    app.include_router(submissions_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies are client errors like missing fields, not 422s
        logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_BODY_MESSAGE}
        )

    if settings.frontend_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.frontend_dir), name="static")
    else:
        logger.warning(f"Frontend directory {settings.frontend_dir} not found; static assets disabled")

    @app.on_event("startup")
    async def startup_event():
        logger.info("=" * 60)
        logger.info("Starting up application")
        logger.info("=" * 60)

        if app.state.notifier is None:
            app.state.notifier = Factory.get_notifier(settings)

        # Keep serving without a database; storage routes will report errors
        try:
            if app.state.repository is None:
                app.state.repository = Factory.get_repository(settings)
            logger.info("Initializing database...")
            await app.state.repository.init_db()
        except StorageError as e:
            logger.error(f"STARTUP ERROR: {e}", exc_info=True)
            if app.state.repository is None:
                app.state.repository = UnavailableRepository(str(e))

        logger.info("Application startup complete")

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app
