from fastapi import APIRouter, Response
from sqlalchemy import select

from app.database import async_session
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.entity_store import create_row, delete_row, get_or_404, list_rows
from app.services.passwords import hash_password
from app.utils.exceptions import AppException
from app.utils.response import success_response

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND = "Usuário não encontrado"


@router.get("")
async def list_users():
    async with async_session() as session:
        rows = await list_rows(session, User, order_by=User.username)
        data = [UserResponse.model_validate(u).model_dump() for u in rows]
    return success_response(data=data)


@router.get("/{user_id}")
async def get_user(user_id: str):
    async with async_session() as session:
        user = await get_or_404(session, User, user_id, NOT_FOUND)
        data = UserResponse.model_validate(user).model_dump()
    return success_response(data=data)


@router.post("", status_code=201)
async def create_user(payload: UserCreate):
    username = payload.username.strip().lower()
    async with async_session() as session:
        result = await session.execute(select(User.id).where(User.username == username))
        if result.first() is not None:
            raise AppException("Nome de usuário já existe")

        data = payload.model_dump(exclude={"password"})
        data["username"] = username
        data["password_hash"] = hash_password(payload.password)
        user = await create_row(session, User, data)
        response = UserResponse.model_validate(user).model_dump()
    return success_response(data=response)


@router.patch("/{user_id}")
async def update_user(user_id: str, payload: UserUpdate):
    async with async_session() as session:
        user = await get_or_404(session, User, user_id, NOT_FOUND)
        data = payload.model_dump(exclude_unset=True)
        password = data.pop("password", None)
        if password:
            user.password_hash = hash_password(password)
        for key, value in data.items():
            setattr(user, key, value)
        await session.commit()
        await session.refresh(user)
        response = UserResponse.model_validate(user).model_dump()
    return success_response(data=response)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str):
    async with async_session() as session:
        user = await get_or_404(session, User, user_id, NOT_FOUND)
        await delete_row(session, user)
    return Response(status_code=204)
