# ezelectronics/dependencies.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.auth_utils import decode_access_token
from ezelectronics.config import API_PREFIX
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User, RoleEnum
from ezelectronics.db import user_functions
from ezelectronics.errors import NotAuthenticatedError, WrongRoleError, UserNotFoundError

# Bearer header is optional; browsers send the access_token cookie instead
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/sessions", auto_error=False)


async def get_current_user(request: Request, token: Optional[str] = Depends(oauth2_scheme),
                           db: AsyncSession = Depends(get_db)) -> User:
    token = token or request.cookies.get("access_token")
    username = decode_access_token(token) if token else None
    if not username:
        raise NotAuthenticatedError()
    try:
        return await user_functions.get_user_by_username(db, username)
    except UserNotFoundError:
        raise NotAuthenticatedError()


def require_roles(*roles: RoleEnum):
    async def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise WrongRoleError()
        return user
    return checker


is_customer = require_roles(RoleEnum.customer)
is_admin = require_roles(RoleEnum.admin)
is_admin_or_manager = require_roles(RoleEnum.admin, RoleEnum.manager)
