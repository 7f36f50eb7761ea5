# ezelectronics/controllers/users.py
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.db import user_functions
from ezelectronics.db.models import User, RoleEnum
from ezelectronics.errors import UserNotAdminError, UserIsAdminError, UnauthorizedUserError, UserInvalidDate


def _is_admin(user: User) -> bool:
    return user.role == RoleEnum.admin


async def create_user(db: AsyncSession, username: str, name: str, surname: str, password: str, role: RoleEnum):
    return await user_functions.create_user(db, username, name, surname, password, role)


async def get_users(db: AsyncSession):
    return await user_functions.get_users(db)


async def get_users_by_role(db: AsyncSession, role: RoleEnum):
    return await user_functions.get_users_by_role(db, role)


async def get_user_by_username(db: AsyncSession, caller: User, username: str):
    """Admins may read anyone; everybody else only themselves."""
    if not _is_admin(caller) and caller.username != username:
        raise UserNotAdminError()
    return await user_functions.get_user_by_username(db, username)


async def delete_user(db: AsyncSession, caller: User, username: str):
    if not _is_admin(caller) and caller.username != username:
        raise UserNotAdminError()
    target = await user_functions.get_user_by_username(db, username)
    if _is_admin(caller) and _is_admin(target) and caller.username != username:
        raise UserIsAdminError()
    return await user_functions.delete_user(db, username)


async def delete_all(db: AsyncSession):
    return await user_functions.delete_all_non_admin_users(db)


async def update_user_info(db: AsyncSession, caller: User, name: str, surname: str, address: str,
                           birthdate: date, username: str):
    if birthdate > date.today():
        raise UserInvalidDate()
    if not _is_admin(caller) and caller.username != username:
        raise UnauthorizedUserError()
    target = await user_functions.get_user_by_username(db, username)
    if _is_admin(caller) and _is_admin(target) and caller.username != username:
        raise UserIsAdminError()
    return await user_functions.update_user(db, username, name, surname, address, birthdate)
