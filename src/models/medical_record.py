"""
Medical history records attached to a patient: past visits and case sheets.

Case sheets only record metadata about an uploaded document; the upload itself
happens outside this package.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from utils.datetime_utils import validate_date_string


class Visit(BaseModel):
    """A completed consultation in the patient's history."""

    id: str
    patient_id: str
    visit_date: str
    doctor_name: str
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('visit_date')
    @classmethod
    def validate_visit_date(cls, v: str) -> str:
        return validate_date_string(v)


class CaseSheet(BaseModel):
    """Metadata of a document filed against a patient."""

    id: str
    patient_id: str
    upload_date: str
    file_name: str
    file_url: str
    uploaded_by: str

    @field_validator('upload_date')
    @classmethod
    def validate_upload_date(cls, v: str) -> str:
        return validate_date_string(v)
