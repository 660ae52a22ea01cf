from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean
from internship_portal.database.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class InternshipApplication(Base):
    __tablename__ = "internship_applications"
    # ids are never handed out twice, even after the highest row is gone
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    # Applicant details (required at submission)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
    education_year = Column(String(50), nullable=False)
    college_name = Column(String(255), nullable=False)
    course_degree_name = Column(String(255), nullable=False)
    gender = Column(String(50), nullable=False)
    office_commute_time = Column(String(100), nullable=False)

    # JSON-encoded list of skill names, see services.application_store
    skills = Column(Text, nullable=False, default="[]")

    # Acknowledgements
    start_at_7am = Column(Boolean, nullable=False, default=False)
    punctuality = Column(Boolean, nullable=False, default=False)
    work_monday_to_saturday = Column(Boolean, nullable=False, default=False)
    complete_90_days = Column(Boolean, nullable=False, default=False)
    break_not_exceed_1_hour = Column(Boolean, nullable=False, default=False)
    end_on_misbehavior = Column(Boolean, nullable=False, default=False)
    end_on_no_output = Column(Boolean, nullable=False, default=False)

    # Free text
    strength = Column(Text, nullable=False, default="")
    weakness = Column(Text, nullable=False, default="")
    hobbies = Column(Text, nullable=False, default="")

    english_fluency_rating = Column(Integer, nullable=False, default=5)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
