from sqlalchemy import Column, String, UniqueConstraint

from app.database import Base


class RolePermission(Base):
    __tablename__ = "role_permissions"
    __table_args__ = (UniqueConstraint("role", "feature"),)

    id = Column(String, primary_key=True)
    role = Column(String(20), nullable=False, index=True)
    feature = Column(String(50), nullable=False)
    created_at = Column(String, nullable=False)
