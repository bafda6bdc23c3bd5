import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config.settings import settings
from schemas.results import (
    NotFoundResponse, ServerErrorResponse, StudentRecordOut, StudentSuccess,
)
from services.table_projector import find_student
from services.table_source import TableSource, build_table_source

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Exam results"])


def get_table_source() -> TableSource:
    return build_table_source(settings)


# ==========================================================
# [READ] result lookup by roll number
# - the sheet is fetched fresh on every request
# - 200 success / 404 not found / 500 fetch or projection failure
# ==========================================================
@router.get(
    "/student/{roll_number}",
    response_model=StudentSuccess,
    responses={404: {"model": NotFoundResponse}, 500: {"model": ServerErrorResponse}},
)
async def get_student_result(roll_number: str, source: TableSource = Depends(get_table_source)):
    try:
        table = await source.fetch_table()
        record = find_student(table, roll_number)
    except Exception as e:
        logger.exception("Error fetching data for roll number %s", roll_number)
        return JSONResponse(
            status_code=500,
            content=ServerErrorResponse(error=str(e)).model_dump(),
        )

    if record is None:
        logger.warning("Student not found: roll_number=%s", roll_number)
        return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())

    logger.info("Result served: roll_number=%s", roll_number)
    return StudentSuccess(data=StudentRecordOut.from_record(record))
