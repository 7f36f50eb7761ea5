# ezelectronics/routes/users.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.controllers import users as controller
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User, RoleEnum
from ezelectronics.db.schemas import UserCreate, UserUpdate, UserSchema
from ezelectronics.dependencies import get_current_user, is_admin

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    await controller.create_user(db, body.username, body.name, body.surname, body.password, body.role)


@router.get("", response_model=List[UserSchema])
async def get_users(user: User = Depends(is_admin), db: AsyncSession = Depends(get_db)):
    return await controller.get_users(db)


@router.get("/roles/{role}", response_model=List[UserSchema])
async def get_users_by_role(role: RoleEnum, user: User = Depends(is_admin), db: AsyncSession = Depends(get_db)):
    return await controller.get_users_by_role(db, role)


@router.get("/{username}", response_model=UserSchema)
async def get_user(username: str, user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await controller.get_user_by_username(db, user, username)


@router.delete("/{username}")
async def delete_user(username: str, user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    await controller.delete_user(db, user, username)


@router.delete("")
async def delete_all_users(user: User = Depends(is_admin), db: AsyncSession = Depends(get_db)):
    await controller.delete_all(db)


@router.patch("/{username}", response_model=UserSchema)
async def update_user(username: str, body: UserUpdate, user: User = Depends(get_current_user),
                      db: AsyncSession = Depends(get_db)):
    return await controller.update_user_info(
        db, user, body.name, body.surname, body.address, body.birthdate, username
    )
