import json
from typing import List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.models.booking import Booking, parse_booking_date
from app.services.booking_store import BookingStore
from app.services.booking_validator import ValidationFailed, validate_booking
from app.core.logger import logger

router = APIRouter()

def get_booking_store(request: Request) -> BookingStore:
    return request.app.state.booking_store

@router.post("/bookings", response_model=Booking)
async def create_booking(request: Request, store: BookingStore = Depends(get_booking_store)):
    """
    Validate the raw body ourselves so a bad payload (or bad JSON) is a plain 400
    with one error message instead of FastAPI's 422.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.info(f"🚫 Booking body is not valid JSON: {e}")
        payload = None

    outcome = validate_booking(payload)
    if isinstance(outcome, ValidationFailed):
        return JSONResponse(
            status_code=400,
            content={"error": outcome.reason, "details": outcome.errors}
        )

    return store.create_booking(outcome.value)

@router.get("/bookings", response_model=List[Booking])
async def list_bookings(store: BookingStore = Depends(get_booking_store)):
    return store.list_bookings()

@router.get("/bookings/date/{day}", response_model=List[Booking])
async def list_bookings_by_date(day: str, store: BookingStore = Depends(get_booking_store)):
    try:
        wanted = parse_booking_date(day)
    except ValueError:
        logger.info(f"🚫 Invalid date in path: {day}")
        return JSONResponse(status_code=400, content={"error": "Invalid date"})

    return store.list_bookings_by_date(wanted)
