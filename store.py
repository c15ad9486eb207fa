
# In-memory class store. Classes are kept in insertion order and are never
# removed; bookings are appended to the class they belong to.

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, List, Optional

logger = logging.getLogger("booking_api.store")


def new_id() -> str:
    return str(uuid.uuid4())


class ClassNotFoundError(LookupError):
    def __init__(self, name: str, day: date):
        super().__init__(f"Class not found: {name} on {day.isoformat()}")
        self.name = name
        self.date = day


@dataclass
class Booking:
    id: str
    member_name: str


@dataclass
class Class:
    id: str
    name: str
    date: date
    capacity: int
    bookings: List[Booking] = field(default_factory=list)


class BookingStore:
    """Process-lifetime collection of classes and their bookings.

    ``id_factory`` produces the ids for new classes and bookings; tests pass a
    deterministic one.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id):
        self._id_factory = id_factory
        self._classes: List[Class] = []
        self._lock = threading.Lock()

    def create_classes(self, name: str, start_date: date, end_date: date, capacity: int) -> List[Class]:
        """Create one class per day from start_date to end_date inclusive.

        An end_date before start_date produces no classes.
        """
        classes = []
        with self._lock:
            for offset in range((end_date - start_date).days + 1):
                classes.append(
                    Class(
                        id=self._id_factory(),
                        name=name,
                        date=start_date + timedelta(days=offset),
                        capacity=capacity,
                    )
                )
            self._classes.extend(classes)
        logger.info("Created %d class(es) named %r from %s to %s", len(classes), name, start_date, end_date)
        return classes

    def list_classes(self) -> List[Class]:
        with self._lock:
            return list(self._classes)

    def find_class(self, name: str, day: date) -> Optional[Class]:
        with self._lock:
            return self._find(name, day)

    def _find(self, name: str, day: date) -> Optional[Class]:
        # first match wins when (name, date) is duplicated
        for cls in self._classes:
            if cls.name == name and cls.date == day:
                return cls
        return None

    def create_booking(self, member_name: str, class_name: str, day: date) -> Booking:
        with self._lock:
            cls = self._find(class_name, day)
            if cls is None:
                raise ClassNotFoundError(class_name, day)
            booking = Booking(id=self._id_factory(), member_name=member_name)
            cls.bookings.append(booking)
        logger.info("Booked %r into %r on %s (booking %s)", member_name, class_name, day, booking.id)
        return booking
