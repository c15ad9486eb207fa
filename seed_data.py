"""
Seed a demo timetable (Yoga, Zumba, HIIT) into a BookingStore.
- Each class runs daily for `days` days, starting tomorrow (IST).
- Classes whose name is already in the store are skipped.
"""

from datetime import timedelta
from store import BookingStore
from utils import today_ist

DEMO_CLASSES = ("Yoga", "Zumba", "HIIT")


def seed_classes(store: BookingStore, days=3, capacity=15):
    start = today_ist() + timedelta(days=1)
    end = start + timedelta(days=days - 1)

    existing_names = {c.name for c in store.list_classes()}

    seeded = []
    for name in DEMO_CLASSES:
        if name in existing_names:
            continue
        seeded.extend(store.create_classes(name, start, end, capacity))
        print(f"Seeded: {name} daily from {start.isoformat()} to {end.isoformat()}")
    return seeded

if __name__ == "__main__":
    seed_classes(BookingStore())
