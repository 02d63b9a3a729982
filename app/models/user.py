from sqlalchemy import Column, String, Boolean

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String(100), nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    email = Column(String, nullable=True, unique=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    role = Column(String(20), nullable=False, default="visualizador")
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
