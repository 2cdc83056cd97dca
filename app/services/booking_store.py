import threading
from datetime import date, datetime
from typing import Dict, List, Tuple, Union

from app.models.booking import Booking, BookingRequest, BookingStatus
from app.core.logger import logger

def calendar_day(value: Union[date, datetime]) -> Tuple[int, int, int]:
    """
    (year, month, day) of a value as written.
    Aware datetimes are NOT converted to another timezone first.
    """
    return (value.year, value.month, value.day)

class BookingStore:
    """
    In-memory booking storage for the lifetime of the process.
    Owns the records and the id sequence; ids start at 1 and are never reused.
    """

    def __init__(self):
        self._bookings: Dict[int, Booking] = {}
        self._current_id = 1
        # id allocation and insertion must happen together
        self._lock = threading.Lock()

    def create_booking(self, request: BookingRequest) -> Booking:
        with self._lock:
            booking_id = self._current_id
            self._current_id += 1
            booking = Booking(
                **request.model_dump(),
                id=booking_id,
                status=BookingStatus.PENDING,
            )
            self._bookings[booking_id] = booking

        logger.info(f"✅ Booking {booking.id} created: {booking.service} on {booking.date.isoformat()}")
        return booking

    def list_bookings(self) -> List[Booking]:
        # dicts keep insertion order
        with self._lock:
            return list(self._bookings.values())

    def list_bookings_by_date(self, day: Union[date, datetime]) -> List[Booking]:
        wanted = calendar_day(day)
        return [
            booking for booking in self.list_bookings()
            if calendar_day(booking.date) == wanted
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookings)
