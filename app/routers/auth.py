import logging

from fastapi import APIRouter
from sqlalchemy import select

from app.database import async_session
from app.models.user import User
from app.schemas.auth import LoginRequest
from app.schemas.user import UserResponse
from app.services.passwords import verify_password
from app.utils.exceptions import AppException
from app.utils.response import success_response
from app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(request: LoginRequest):
    async with async_session() as session:
        result = await session.execute(
            select(User).where(User.username == request.username.strip().lower())
        )
        user = result.scalars().first()

        if user is None or not user.is_active:
            raise AppException("Credenciais inválidas", status_code=400)

        if not verify_password(request.password, user.password_hash):
            logger.warning("Failed login for %s", user.username)
            raise AppException("Credenciais inválidas", status_code=400)

        user.last_login = now_iso()
        await session.commit()
        data = UserResponse.model_validate(user).model_dump()

    return success_response(data=data)
