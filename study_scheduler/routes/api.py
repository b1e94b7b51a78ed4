import logging

from fastapi import APIRouter, HTTPException

from ..controllers.timetable_controller import SessionNotFoundError, TimetableController
from ..models.timetable import (
    Day,
    GenerateRequest,
    GenerateResponse,
    RegenerateDayRequest,
    SessionUpdateRequest,
    WeekdaysResponse,
)
from ..validation import ScheduleValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/timetable/days", response_model=WeekdaysResponse)
def get_weekdays():
    return WeekdaysResponse(days=TimetableController.weekdays())

@router.post("/timetable/generate", response_model=GenerateResponse, status_code=201)
def generate_timetable(request: GenerateRequest):
    """
    Generate a weekly timetable from subjects and study preferences.
    """
    try:
        return TimetableController.generate_timetable(request.subjects, request.preferences, seed=request.seed)
    except ScheduleValidationError as e:
        raise HTTPException(status_code=400, detail=e.report.as_dict()) from e
    except Exception as e:
        logger.exception("Timetable generation failed")
        raise HTTPException(status_code=500, detail=f"Error generating timetable: {str(e)}") from e

@router.post("/timetable/regenerate/{day_of_week}", response_model=Day)
def regenerate_day(day_of_week: int, request: RegenerateDayRequest):
    try:
        return TimetableController.regenerate_day(
            day_of_week,
            request.day,
            request.subjects,
            request.preferences,
            seed=request.seed,
        )
    except ScheduleValidationError as e:
        raise HTTPException(status_code=400, detail=e.report.as_dict()) from e
    except Exception as e:
        logger.exception("Day regeneration failed")
        raise HTTPException(status_code=500, detail=f"Error regenerating day: {str(e)}") from e

@router.put("/timetable/session/{index}", response_model=Day)
def update_session(index: int, request: SessionUpdateRequest):
    try:
        return TimetableController.update_session(request.day, index, request.completed)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.exception("Session update failed")
        raise HTTPException(status_code=500, detail=f"Error updating session: {str(e)}") from e
