# ezelectronics/routes/sessions.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.auth_utils import create_access_token
from ezelectronics.config import COOKIE_SECURE
from ezelectronics.db import user_functions
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User
from ezelectronics.db.schemas import LoginRequest, UserSchema
from ezelectronics.dependencies import get_current_user
from ezelectronics.errors import WrongCredentialsError
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=UserSchema)
async def login(body: LoginRequest, response: Response, db: AsyncSession = Depends(get_db)):
    user = await user_functions.get_authenticated_user(db, body.username, body.password)
    if not user:
        _logger.info(f"Failed login for {body.username}")
        raise WrongCredentialsError()

    token = create_access_token({"sub": user.username, "role": user.role.value})
    response.set_cookie(key="access_token", value=token, httponly=True, secure=COOKIE_SECURE, samesite="lax")
    return user


@router.delete("/current")
async def logout(response: Response, user: User = Depends(get_current_user)):
    # only the cookie is dropped; a bearer copy of the JWT stays valid until exp
    response.delete_cookie("access_token", httponly=True, secure=COOKIE_SECURE, samesite="lax")


@router.get("/current", response_model=UserSchema)
async def current_user(user: User = Depends(get_current_user)):
    return user
