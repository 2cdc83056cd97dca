from datetime import date, datetime, time
from enum import Enum
from typing import Annotated, Any
from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

def parse_booking_date(value: Any) -> datetime:
    """
    Turns an ISO 8601 string (or a date/datetime) into a datetime.
    A bare date becomes midnight; a trailing 'Z' means UTC.
    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        raise ValueError("date must be an ISO 8601 string")

    text = value.strip()
    if not text:
        raise ValueError("date must not be empty")
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"unparseable date: {value!r}")

def check_email(value: str) -> str:
    """Rejects malformed addresses but keeps the text exactly as sent."""
    validate_email(value, check_deliverability=False)
    return value

EmailAddress = Annotated[str, AfterValidator(check_email)]

class BookingRequest(BaseModel):
    # Anything besides these four fields is dropped on validation
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    email: EmailAddress
    service: str = Field(..., min_length=1)
    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> datetime:
        return parse_booking_date(value)

class Booking(BookingRequest):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    status: BookingStatus = BookingStatus.PENDING
