from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import datetime

# Field names as they appear in the submission form payload (camelCase).
# Required fields must be present and non-empty; englishFluencyRating is
# required to be present but its value is defaulted, not rejected.
TEXT_FIELDS = (
    "name",
    "email",
    "phoneNumber",
    "educationYear",
    "collegeName",
    "courseDegreeName",
    "gender",
    "officeCommuteTime",
)

REQUIRED_FIELDS = TEXT_FIELDS + ("englishFluencyRating",)

FLAG_FIELDS = (
    "startAt7AM",
    "punctuality",
    "workMondayToSaturday",
    "complete90Days",
    "breakNotExceed1Hour",
    "endOnMisbehavior",
    "endOnNoOutput",
)

OPTIONAL_TEXT_FIELDS = ("strength", "weakness", "hobbies")

LIST_FIELDS = ("skills",)

INTEGER_FIELDS = ("englishFluencyRating",)

DEFAULT_ENGLISH_FLUENCY_RATING = 5


class ApplicationBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    phone_number: str = Field(alias="phoneNumber")
    education_year: str = Field(alias="educationYear")
    college_name: str = Field(alias="collegeName")
    course_degree_name: str = Field(alias="courseDegreeName")
    gender: str
    office_commute_time: str = Field(alias="officeCommuteTime")
    skills: List[str] = []
    start_at_7am: bool = Field(default=False, alias="startAt7AM")
    punctuality: bool = False
    work_monday_to_saturday: bool = Field(default=False, alias="workMondayToSaturday")
    complete_90_days: bool = Field(default=False, alias="complete90Days")
    break_not_exceed_1_hour: bool = Field(default=False, alias="breakNotExceed1Hour")
    end_on_misbehavior: bool = Field(default=False, alias="endOnMisbehavior")
    end_on_no_output: bool = Field(default=False, alias="endOnNoOutput")
    strength: str = ""
    weakness: str = ""
    hobbies: str = ""
    english_fluency_rating: int = Field(default=DEFAULT_ENGLISH_FLUENCY_RATING, alias="englishFluencyRating")


class ApplicationCreate(ApplicationBase):
    """Normalized submission, ready to be persisted"""
    pass


class ApplicationResponse(ApplicationBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ApplicationSubmitResponse(BaseModel):
    message: str
    id: int


class ErrorResponse(BaseModel):
    error: str
