from typing import Annotated

from pydantic import AfterValidator, BaseModel

from app.config import settings


def _check_damage_photos(value: list[str] | None) -> list[str] | None:
    if value is not None and len(value) > settings.max_damage_photos:
        raise ValueError(f"Máximo de {settings.max_damage_photos} fotos de avaria por etapa")
    return value


DamagePhotos = Annotated[list[str], AfterValidator(_check_damage_photos)]


class CheckpointPayload(BaseModel):
    """Body of a transport check-in or check-out."""

    latitude: str | None = None
    longitude: str | None = None
    frontal_photo: str | None = None
    lateral1_photo: str | None = None
    lateral2_photo: str | None = None
    rear_photo: str | None = None
    odometer_photo: str | None = None
    fuel_level_photo: str | None = None
    selfie_photo: str | None = None
    damage_photos: DamagePhotos = []
    notes: str | None = None

    def as_leg(self, leg: str) -> dict:
        return {f"{leg}_{key}": value for key, value in self.model_dump().items()}


class CheckinFields(BaseModel):
    checkin_latitude: str | None = None
    checkin_longitude: str | None = None
    checkin_frontal_photo: str | None = None
    checkin_lateral1_photo: str | None = None
    checkin_lateral2_photo: str | None = None
    checkin_rear_photo: str | None = None
    checkin_odometer_photo: str | None = None
    checkin_fuel_level_photo: str | None = None
    checkin_selfie_photo: str | None = None
    checkin_damage_photos: DamagePhotos | None = None
    checkin_notes: str | None = None


class CheckoutFields(BaseModel):
    checkout_latitude: str | None = None
    checkout_longitude: str | None = None
    checkout_frontal_photo: str | None = None
    checkout_lateral1_photo: str | None = None
    checkout_lateral2_photo: str | None = None
    checkout_rear_photo: str | None = None
    checkout_odometer_photo: str | None = None
    checkout_fuel_level_photo: str | None = None
    checkout_selfie_photo: str | None = None
    checkout_damage_photos: DamagePhotos | None = None
    checkout_notes: str | None = None
