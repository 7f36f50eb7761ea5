# ezelectronics/routes/carts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.controllers import carts as controller
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User
from ezelectronics.db.schemas import CartAdd, CartSchema
from ezelectronics.dependencies import is_customer, is_admin_or_manager

router = APIRouter(prefix="/carts", tags=["carts"])


@router.get("", response_model=CartSchema)
async def get_cart(user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    return await controller.get_cart(db, user)


@router.post("")
async def add_to_cart(body: CartAdd, user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    await controller.add_to_cart(db, user, body.model)


@router.patch("")
async def checkout_cart(user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    await controller.checkout_cart(db, user)


@router.get("/history", response_model=List[CartSchema])
async def get_customer_carts(user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    return await controller.get_customer_carts(db, user)


@router.delete("/products/{model}")
async def remove_product_from_cart(model: str, user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    await controller.remove_product_from_cart(db, user, model)


@router.delete("/current")
async def clear_cart(user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    await controller.clear_cart(db, user)


@router.delete("")
async def delete_all_carts(user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    await controller.delete_all_carts(db)


@router.get("/all", response_model=List[CartSchema])
async def get_all_carts(user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    return await controller.get_all_carts(db)
