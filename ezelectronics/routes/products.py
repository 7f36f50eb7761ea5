# ezelectronics/routes/products.py
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.controllers import products as controller
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User, CategoryEnum
from ezelectronics.db.schemas import ProductCreate, ProductRestock, ProductSell, ProductSchema, QuantityResponse
from ezelectronics.dependencies import get_current_user, is_admin_or_manager

router = APIRouter(prefix="/products", tags=["products"])

Grouping = Optional[Literal["category", "model"]]


@router.post("")
async def register_product(body: ProductCreate, user: User = Depends(is_admin_or_manager),
                           db: AsyncSession = Depends(get_db)):
    await controller.register_products(
        db, body.model, body.category, body.quantity, body.details, body.selling_price, body.arrival_date
    )


@router.patch("/{model}", response_model=QuantityResponse)
async def change_product_quantity(model: str, body: ProductRestock, user: User = Depends(is_admin_or_manager),
                                  db: AsyncSession = Depends(get_db)):
    quantity = await controller.change_product_quantity(db, model, body.quantity, body.change_date)
    return QuantityResponse(quantity=quantity)


@router.patch("/{model}/sell", response_model=QuantityResponse)
async def sell_product(model: str, body: ProductSell, user: User = Depends(is_admin_or_manager),
                       db: AsyncSession = Depends(get_db)):
    quantity = await controller.sell_product(db, model, body.quantity, body.selling_date)
    return QuantityResponse(quantity=quantity)


@router.get("", response_model=List[ProductSchema])
async def get_products(grouping: Grouping = None, category: Optional[CategoryEnum] = None,
                       model: Optional[str] = Query(default=None, min_length=1),
                       user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    return await controller.get_products(db, grouping, category, model)


@router.get("/available", response_model=List[ProductSchema])
async def get_available_products(grouping: Grouping = None, category: Optional[CategoryEnum] = None,
                                 model: Optional[str] = Query(default=None, min_length=1),
                                 user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await controller.get_available_products(db, grouping, category, model)


@router.delete("")
async def delete_all_products(user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    await controller.delete_all_products(db)


@router.delete("/{model}")
async def delete_product(model: str, user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    await controller.delete_product(db, model)
