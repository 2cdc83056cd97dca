from dataclasses import dataclass, field
from typing import Any, Dict, List, Union
from pydantic import ValidationError

from app.models.booking import BookingRequest
from app.core.logger import logger

INVALID_BOOKING_DATA = "Invalid booking data"

@dataclass(frozen=True)
class ValidationSucceeded:
    value: BookingRequest

@dataclass(frozen=True)
class ValidationFailed:
    reason: str = INVALID_BOOKING_DATA
    errors: List[Dict[str, Any]] = field(default_factory=list)

ValidationOutcome = Union[ValidationSucceeded, ValidationFailed]

def validate_booking(raw: Any) -> ValidationOutcome:
    """
    Checks an untyped payload (usually parsed JSON) against the booking shape.

    Returns ValidationSucceeded with a BookingRequest holding only
    name/email/service/date, or ValidationFailed with per-field diagnostics.
    Never raises for bad input.
    """
    if not isinstance(raw, dict):
        logger.info(f"🚫 Booking rejected: payload is {type(raw).__name__}, not an object")
        return ValidationFailed(errors=[{"loc": [], "msg": "Input should be an object"}])

    try:
        request = BookingRequest.model_validate(raw)
    except ValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        logger.info(f"🚫 Booking rejected: {[err['loc'] for err in errors]}")
        return ValidationFailed(errors=errors)

    return ValidationSucceeded(value=request)
