import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from internship_portal.database.database import get_db
from internship_portal.schemas.internship_application import (
    ApplicationResponse,
    ApplicationSubmitResponse,
    ErrorResponse,
)
from internship_portal.services.application_normalizer import (
    SubmissionValidationError,
    ValidationErrorKind,
    normalize_submission,
)
from internship_portal.services.application_store import ApplicationStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/submit",
             status_code=201,
             response_model=ApplicationSubmitResponse,
             responses={
                 400: {"model": ErrorResponse},
                 500: {"model": ErrorResponse},
             })
async def submit_application(request: Request, db: Session = Depends(get_db)):
    """
    Internship application submission (public form)

    - Required: name, email, phoneNumber, educationYear, collegeName,
      courseDegreeName, gender, officeCommuteTime, englishFluencyRating
    - Missing acknowledgement flags are stored as false
    - An englishFluencyRating that is not a number is stored as 5
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.info("Rejected submission: request body is not valid JSON")
        return _error(400, "Invalid request body")

    try:
        data = normalize_submission(payload)
    except SubmissionValidationError as e:
        logger.info(f"Rejected submission: {e}")
        if e.kind == ValidationErrorKind.INVALID_PAYLOAD:
            return _error(400, "Invalid request body")
        return _error(400, "Missing required fields")

    try:
        # Session I/O is blocking; keep it off the event loop
        application = await run_in_threadpool(ApplicationStore(db).create, data)
    except StoreError:
        return _error(500, "Failed to submit application")

    return JSONResponse(
        status_code=201,
        content={"message": "Application submitted successfully", "id": application.id},
    )


@router.get("/applications",
            response_model=List[ApplicationResponse],
            responses={
                500: {"model": ErrorResponse},
            })
def list_applications(db: Session = Depends(get_db)):
    """
    Administrative listing of every submitted application, newest first.
    Skills are returned as a list of strings.
    """
    try:
        return ApplicationStore(db).list_all()
    except StoreError:
        return _error(500, "Failed to fetch applications")
