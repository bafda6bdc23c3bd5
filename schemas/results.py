"""
schemas/results.py

Response models for the result lookup API (Pydantic v2).
- Field names are snake_case in Python, camelCase on the wire (aliases).
- Numbers that failed to parse (NaN) are sent as null.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.table_projector import StudentRecord, SubjectResult
from utils.numbers import nan_to_none


class SubjectResultOut(BaseModel):
    name: str
    max_marks: Optional[int] = Field(None, alias="maxMarks")
    obtained: Optional[int] = None
    grade: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, s: SubjectResult) -> "SubjectResultOut":
        return cls(
            name=s.name,
            max_marks=nan_to_none(s.max_marks),
            obtained=nan_to_none(s.obtained),
            grade=s.grade,
        )


class StudentRecordOut(BaseModel):
    name: Optional[str] = None
    class_name: Optional[str] = Field(None, alias="class")
    school: str
    exam_incharge_signature: str = Field(..., alias="examInchargeSignature")
    total_marks: Optional[int] = Field(None, alias="totalMarks")
    total_obtained: Optional[int] = Field(None, alias="totalObtained")
    percentage: Optional[float] = None
    cgpa: Optional[str] = None          # raw text, may carry remarks
    result: Optional[str] = None
    exam_name: str = Field(..., alias="examName")
    dob: str
    father_name: str = Field(..., alias="fatherName")
    mother_name: str = Field(..., alias="motherName")
    subjects: List[SubjectResultOut] = []

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, r: StudentRecord) -> "StudentRecordOut":
        return cls(
            name=r.name,
            class_name=r.class_name,
            school=r.school,
            exam_incharge_signature=r.exam_incharge_signature,
            total_marks=nan_to_none(r.total_marks),
            total_obtained=nan_to_none(r.total_obtained),
            percentage=nan_to_none(r.percentage),
            cgpa=r.cgpa,
            result=r.result,
            exam_name=r.exam_name,
            dob=r.dob,
            father_name=r.father_name,
            mother_name=r.mother_name,
            subjects=[SubjectResultOut.from_result(s) for s in r.subjects],
        )


# ==========================================================
# [Envelopes]
# ==========================================================
class StudentSuccess(BaseModel):
    success: bool = True
    data: StudentRecordOut


class NotFoundResponse(BaseModel):
    success: bool = False
    message: str = "Student not found"


class ServerErrorResponse(BaseModel):
    success: bool = False
    message: str = "Server error"
    error: str
