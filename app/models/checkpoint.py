"""Check-in / check-out legs shared by collects and transports.

Each leg is a timestamp, the device position, a fixed set of single-photo
slots and a bounded list of damage photos.
"""
from sqlalchemy import Column, String, JSON

PHOTO_SLOTS = ("frontal", "lateral1", "lateral2", "rear", "odometer", "fuel_level", "selfie")


class CheckinMixin:
    checkin_date_time = Column(String, nullable=True)
    checkin_latitude = Column(String, nullable=True)
    checkin_longitude = Column(String, nullable=True)
    checkin_frontal_photo = Column(String, nullable=True)
    checkin_lateral1_photo = Column(String, nullable=True)
    checkin_lateral2_photo = Column(String, nullable=True)
    checkin_rear_photo = Column(String, nullable=True)
    checkin_odometer_photo = Column(String, nullable=True)
    checkin_fuel_level_photo = Column(String, nullable=True)
    checkin_selfie_photo = Column(String, nullable=True)
    checkin_damage_photos = Column(JSON, nullable=True)
    checkin_notes = Column(String, nullable=True)


class CheckoutMixin:
    checkout_date_time = Column(String, nullable=True)
    checkout_latitude = Column(String, nullable=True)
    checkout_longitude = Column(String, nullable=True)
    checkout_frontal_photo = Column(String, nullable=True)
    checkout_lateral1_photo = Column(String, nullable=True)
    checkout_lateral2_photo = Column(String, nullable=True)
    checkout_rear_photo = Column(String, nullable=True)
    checkout_odometer_photo = Column(String, nullable=True)
    checkout_fuel_level_photo = Column(String, nullable=True)
    checkout_selfie_photo = Column(String, nullable=True)
    checkout_damage_photos = Column(JSON, nullable=True)
    checkout_notes = Column(String, nullable=True)


def leg_columns(leg: str) -> list[str]:
    """Attribute names of every column belonging to a leg ("checkin" or "checkout")."""
    names = [f"{leg}_date_time", f"{leg}_latitude", f"{leg}_longitude"]
    names += [f"{leg}_{slot}_photo" for slot in PHOTO_SLOTS]
    names += [f"{leg}_damage_photos", f"{leg}_notes"]
    return names
