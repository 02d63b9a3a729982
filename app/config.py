from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/db.sqlite3"
    api_key: str = ""  # empty = no auth check (local dev)
    cors_origins: list[str] = ["http://localhost:5000", "http://localhost:8000"]
    log_level: str = "INFO"

    admin_username: str = "admin"
    admin_password: str = "admin123"

    request_number_prefix: str = "OTD"
    request_number_width: int = 5
    max_damage_photos: int = 10

    # Status applied when an admin undoes a transport leg
    clear_checkin_transport_status: Literal["pendente", "em_transito"] = "pendente"
    clear_checkout_vehicle_status: Literal["despachado", "em_estoque"] = "despachado"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
