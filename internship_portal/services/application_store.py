import json
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from internship_portal.models.internship_application import InternshipApplication
from internship_portal.schemas.internship_application import ApplicationCreate, ApplicationResponse

logger = logging.getLogger(__name__)


class StoreErrorKind(str, Enum):
    WRITE_FAILURE = "WriteFailure"
    READ_FAILURE = "ReadFailure"


class StoreError(Exception):
    def __init__(self, kind: StoreErrorKind, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)


class SkillsDecodeError(ValueError):
    """Stored skills value is not a JSON list of strings"""


def encode_skills(skills: List[str]) -> str:
    return json.dumps(list(skills), ensure_ascii=False)


def decode_skills(raw: Optional[str]) -> List[str]:
    # Empty column is treated as an empty list
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise SkillsDecodeError(f"skills is not valid JSON: {e}") from e
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SkillsDecodeError("skills must be a JSON list of strings")
    return value


def _as_utc(value: datetime) -> datetime:
    # SQLite hands DateTime(timezone=True) columns back without tzinfo
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ApplicationStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: ApplicationCreate) -> InternshipApplication:
        """Persists one normalized submission; id and timestamps are assigned here"""
        fields = data.model_dump(by_alias=False)
        fields["skills"] = encode_skills(data.skills)
        application = InternshipApplication(**fields)
        try:
            self.db.add(application)
            self.db.commit()
            self.db.refresh(application)
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            # Drivers raise OverflowError/ValueError for values the column cannot hold
            self.db.rollback()
            logger.exception("Failed to store internship application")
            raise StoreError(StoreErrorKind.WRITE_FAILURE, "Failed to store application") from e

        logger.info(f"Stored internship application id={application.id}")
        return application

    def list_all(self) -> List[ApplicationResponse]:
        """
        Every stored application, newest first.

        Rows whose skills cannot be decoded are logged and left out of the
        result rather than failing the whole listing.
        """
        try:
            rows = (
                self.db.query(InternshipApplication)
                .order_by(InternshipApplication.created_at.desc(), InternshipApplication.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to read internship applications")
            raise StoreError(StoreErrorKind.READ_FAILURE, "Failed to read applications") from e

        applications = []
        for row in rows:
            try:
                applications.append(self._to_response(row))
            except SkillsDecodeError as e:
                logger.error(f"Skipping application id={row.id}: {e}")
        return applications

    def count(self) -> int:
        try:
            return self.db.query(InternshipApplication).count()
        except SQLAlchemyError as e:
            logger.exception("Failed to count internship applications")
            raise StoreError(StoreErrorKind.READ_FAILURE, "Failed to count applications") from e

    @staticmethod
    def _to_response(row: InternshipApplication) -> ApplicationResponse:
        return ApplicationResponse(
            id=row.id,
            name=row.name,
            email=row.email,
            phone_number=row.phone_number,
            education_year=row.education_year,
            college_name=row.college_name,
            course_degree_name=row.course_degree_name,
            gender=row.gender,
            office_commute_time=row.office_commute_time,
            skills=decode_skills(row.skills),
            start_at_7am=row.start_at_7am,
            punctuality=row.punctuality,
            work_monday_to_saturday=row.work_monday_to_saturday,
            complete_90_days=row.complete_90_days,
            break_not_exceed_1_hour=row.break_not_exceed_1_hour,
            end_on_misbehavior=row.end_on_misbehavior,
            end_on_no_output=row.end_on_no_output,
            strength=row.strength or "",
            weakness=row.weakness or "",
            hobbies=row.hobbies or "",
            english_fluency_rating=row.english_fluency_rating,
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )
