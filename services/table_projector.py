"""
services/table_projector.py

Turns the raw results sheet (header row + data rows of strings) into one
student record.

Two phases:
  1) discover_schema(header)  -> ColumnSchema (fixed column positions + subject columns)
  2) project_row(schema, row) -> StudentRecord

Subject columns are the non-empty headers between "Class" and "Total_Marks".
A subject "Math" may be accompanied by "Math_Grade" and/or "Math_Max" columns.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from utils.numbers import Number, parse_float, parse_int

logger = logging.getLogger(__name__)

RawTable = Sequence[Sequence[str]]

GRADE_SUFFIX = "_Grade"
MAX_SUFFIX = "_Max"

DEFAULT_SCHOOL = "PM SHRI KENDRIYA VIDYALAYA RAEBARELI"
DEFAULT_SIGNATURE = "Exam Incharge.png"
DEFAULT_EXAM_NAME = "Final Term"
NOT_AVAILABLE = "Not Available"
DEFAULT_MAX_MARKS = 100

# ColumnSchema attribute -> sheet header label
FIXED_COLUMNS = {
    "roll_number": "Roll_Number",
    "name": "Name",
    "class_name": "Class",
    "school": "School",
    "exam_incharge_signature": "ExamInchargeSignature",
    "total_marks": "Total_Marks",
    "total_obtained": "Total_Obtained",
    "percentage": "Percentage",
    "cgpa": "CGPA",
    "result": "Result",
    "exam_name": "Exam_Name",
    "dob": "DOB",
    "father_name": "Father_Name",
    "mother_name": "Mother_Name",
}


# ==========================================================
# [Types]
# ==========================================================
@dataclass(frozen=True)
class SubjectColumn:
    name: str
    index: int
    grade_index: Optional[int] = None
    max_marks_index: Optional[int] = None


@dataclass(frozen=True)
class ColumnSchema:
    """Column positions resolved from the header row; None = column not present."""
    roll_number: Optional[int] = None
    name: Optional[int] = None
    class_name: Optional[int] = None
    school: Optional[int] = None
    exam_incharge_signature: Optional[int] = None
    total_marks: Optional[int] = None
    total_obtained: Optional[int] = None
    percentage: Optional[int] = None
    cgpa: Optional[int] = None
    result: Optional[int] = None
    exam_name: Optional[int] = None
    dob: Optional[int] = None
    father_name: Optional[int] = None
    mother_name: Optional[int] = None
    subjects: Tuple[SubjectColumn, ...] = ()


@dataclass
class SubjectResult:
    name: str
    max_marks: Number
    obtained: Number
    grade: str


@dataclass
class StudentRecord:
    name: Optional[str]
    class_name: Optional[str]
    school: str
    exam_incharge_signature: str
    total_marks: Number
    total_obtained: Number
    percentage: float
    cgpa: Optional[str]  # free text, may hold remarks
    result: Optional[str]
    exam_name: str
    dob: str
    father_name: str
    mother_name: str
    subjects: List[SubjectResult] = field(default_factory=list)


# ==========================================================
# [Helpers]
# ==========================================================
def _position(header: Sequence[str], label: str) -> Optional[int]:
    try:
        return list(header).index(label)
    except ValueError:
        return None


def _cell(row: Sequence[str], index: Optional[int]) -> Optional[str]:
    """Cell value, or None when the column is absent or the row is short."""
    if index is None or index >= len(row):
        return None
    return row[index]


def _text_or_default(row: Sequence[str], index: Optional[int], default: str) -> str:
    value = _cell(row, index)
    return value if value else default


def compute_grade(marks: Union[int, float]) -> str:
    """Letter grade on a 100-mark scale (NaN falls through to "F")."""
    if marks >= 90:
        return "A"
    elif marks >= 80:
        return "B"
    elif marks >= 70:
        return "C"
    elif marks >= 60:
        return "D"
    elif marks >= 50:
        return "E"
    return "F"


# ==========================================================
# [Phase 1] schema discovery
# ==========================================================
def discover_schema(header: Sequence[str]) -> ColumnSchema:
    positions = {attr: _position(header, label) for attr, label in FIXED_COLUMNS.items()}

    start = positions["class_name"] + 1 if positions["class_name"] is not None else 0
    end = positions["total_marks"]
    if end is None:
        logger.warning("Header has no Total_Marks column; no subject columns discovered")
        end = start

    subjects = []
    for i in range(start, end):
        label = header[i]
        if not label or GRADE_SUFFIX in label or MAX_SUFFIX in label:
            continue
        subjects.append(SubjectColumn(
            name=label,
            index=i,
            grade_index=_position(header, f"{label}{GRADE_SUFFIX}"),
            max_marks_index=_position(header, f"{label}{MAX_SUFFIX}"),
        ))

    return ColumnSchema(subjects=tuple(subjects), **positions)


# ==========================================================
# [Phase 2] row projection
# ==========================================================
def project_subject(subject: SubjectColumn, row: Sequence[str]) -> SubjectResult:
    obtained = parse_int(_cell(row, subject.index))

    grade_cell = _cell(row, subject.grade_index)
    grade = grade_cell if grade_cell else compute_grade(obtained)

    max_cell = _cell(row, subject.max_marks_index)
    max_marks = parse_int(max_cell) if max_cell else DEFAULT_MAX_MARKS

    return SubjectResult(name=subject.name, max_marks=max_marks, obtained=obtained, grade=grade)


def project_row(schema: ColumnSchema, row: Sequence[str]) -> StudentRecord:
    return StudentRecord(
        name=_cell(row, schema.name),
        class_name=_cell(row, schema.class_name),
        school=_text_or_default(row, schema.school, DEFAULT_SCHOOL),
        exam_incharge_signature=_text_or_default(row, schema.exam_incharge_signature, DEFAULT_SIGNATURE),
        total_marks=parse_int(_cell(row, schema.total_marks)),
        total_obtained=parse_int(_cell(row, schema.total_obtained)),
        percentage=parse_float(_cell(row, schema.percentage)),
        cgpa=_cell(row, schema.cgpa),
        result=_cell(row, schema.result),
        exam_name=_text_or_default(row, schema.exam_name, DEFAULT_EXAM_NAME),
        dob=_text_or_default(row, schema.dob, NOT_AVAILABLE),
        father_name=_text_or_default(row, schema.father_name, NOT_AVAILABLE),
        mother_name=_text_or_default(row, schema.mother_name, NOT_AVAILABLE),
        subjects=[project_subject(s, row) for s in schema.subjects],
    )


def find_student(table: RawTable, roll_number: str) -> Optional[StudentRecord]:
    """
    Look up ``roll_number`` in ``table`` (row 0 = header).
    - exact string match on the Roll_Number column
    - the first matching row wins when roll numbers repeat
    - None when nothing matches
    """
    if not table:
        return None

    schema = discover_schema(table[0])
    if schema.roll_number is None:
        logger.warning("Header has no Roll_Number column")
        return None

    for row in table[1:]:
        if _cell(row, schema.roll_number) == roll_number:
            return project_row(schema, row)
    return None
