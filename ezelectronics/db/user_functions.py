# ezelectronics/db/user_functions.py
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete

from ezelectronics.auth_utils import generate_salt, hash_password, verify_password
from ezelectronics.db.models import User, RoleEnum
from ezelectronics.errors import UserNotFoundError, UserAlreadyExistsError
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)


async def get_user_by_username(db: AsyncSession, username: str):
    result = await db.execute(select(User).filter(User.username == username))
    user = result.scalar_one_or_none()
    if not user:
        raise UserNotFoundError()
    return user


async def get_authenticated_user(db: AsyncSession, username: str, password: str):
    """Return the user matching the credentials, or None."""
    result = await db.execute(select(User).filter(User.username == username))
    user = result.scalar_one_or_none()
    if user and verify_password(password, user.salt, user.hashed_password):
        return user
    return None


async def create_user(db: AsyncSession, username: str, name: str, surname: str, password: str, role: RoleEnum):
    result = await db.execute(select(User).filter(User.username == username))
    if result.scalar_one_or_none():
        raise UserAlreadyExistsError()

    salt = generate_salt()
    db_user = User(
        username=username,
        name=name,
        surname=surname,
        hashed_password=hash_password(password, salt),
        salt=salt,
        role=role,
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    _logger.info(f"Created user {username} with role {role.value}")
    return db_user


async def get_users(db: AsyncSession):
    result = await db.execute(select(User).order_by(User.username))
    return result.scalars().all()


async def get_users_by_role(db: AsyncSession, role: RoleEnum):
    result = await db.execute(select(User).filter(User.role == role).order_by(User.username))
    return result.scalars().all()


async def update_user(db: AsyncSession, username: str, name: str, surname: str, address: str, birthdate: date):
    db_user = await get_user_by_username(db, username)
    db_user.name = name
    db_user.surname = surname
    db_user.address = address
    db_user.birthdate = birthdate
    await db.commit()
    await db.refresh(db_user)
    _logger.info(f"Updated user {username}")
    return db_user


async def delete_user(db: AsyncSession, username: str):
    db_user = await get_user_by_username(db, username)
    await db.delete(db_user)
    await db.commit()
    _logger.info(f"Deleted user {username}")
    return True


# Admins are never removed by the bulk delete
async def delete_all_non_admin_users(db: AsyncSession):
    await db.execute(delete(User).where(User.role != RoleEnum.admin))
    await db.commit()
    _logger.info("Deleted all non-admin users")
    return True
