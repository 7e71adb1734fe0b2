import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from portfolio_backend.dependencies import get_notifier, get_repository
from portfolio_backend.errors import DeliveryError, StorageError
from portfolio_backend.interfaces.notifier import INotifier
from portfolio_backend.interfaces.repository import ISubmissionRepository
from portfolio_backend.schemas import SubmissionCreate, SubmissionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])

SUCCESS_MESSAGE = "Form submitted and email sent successfully!"
MISSING_FIELDS_MESSAGE = "Missing required fields."
INVALID_BODY_MESSAGE = "Invalid request body."
SUBMIT_FAILED_MESSAGE = "Failed to send message. Please check server logs for details (Error 500)."
LIST_FAILED_MESSAGE = "Failed to fetch submissions."


@router.post("/submit")
async def create_submission(
    submission_data: SubmissionCreate,
    repository: ISubmissionRepository = Depends(get_repository),
    notifier: INotifier = Depends(get_notifier)
):
    """
    Accept a contact-form submission.

    Flow:
    1. Reject with 400 if name, email or prompt is missing (nothing stored, nothing sent)
    2. Save the submission
    3. Email the notification
    4. Acknowledge

    A failed email does not remove the saved row.
    """
    missing = submission_data.missing_fields()
    if missing:
        logger.info(f"Rejected submission, missing fields: {', '.join(missing)}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": MISSING_FIELDS_MESSAGE}
        )

    fields = submission_data.model_dump(include={"name", "email", "about", "prompt"})
    try:
        submission_id = await repository.insert(**fields)
        logger.info(f"Saved submission ID: {submission_id}")

        message_id = await notifier.notify(**fields)
        logger.info(f"[{submission_id}] Email sent successfully, message ID: {message_id}")

    except (StorageError, DeliveryError) as e:
        logger.error(f"Submission error: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": SUBMIT_FAILED_MESSAGE}
        )

    return {"message": SUCCESS_MESSAGE}


@router.get("/submissions", response_model=List[SubmissionResponse])
async def list_submissions(repository: ISubmissionRepository = Depends(get_repository)):
    """
    List every submission, most recent first (used by submissions.html).
    """
    try:
        return await repository.list_all()
    except StorageError as e:
        logger.error(f"Failed to list submissions: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": LIST_FAILED_MESSAGE}
        )
