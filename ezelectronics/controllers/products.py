# ezelectronics/controllers/products.py
from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.db import product_functions
from ezelectronics.db.models import CategoryEnum


async def register_products(db: AsyncSession, model: str, category: CategoryEnum, quantity: int,
                            details: Optional[str], selling_price: float, arrival_date: Optional[date]):
    await product_functions.new_model(db, model, category, quantity, details, selling_price, arrival_date)


async def change_product_quantity(db: AsyncSession, model: str, quantity: int, change_date: Optional[date]) -> int:
    return await product_functions.update_model(db, model, quantity, change_date)


async def sell_product(db: AsyncSession, model: str, quantity: int, selling_date: Optional[date]) -> int:
    return await product_functions.sell_model(db, model, quantity, selling_date)


async def get_products(db: AsyncSession, grouping: Optional[str], category: Optional[str], model: Optional[str]):
    return await product_functions.get_products(db, grouping, category, model)


async def get_available_products(db: AsyncSession, grouping: Optional[str], category: Optional[str],
                                 model: Optional[str]):
    return await product_functions.get_products(db, grouping, category, model, available_only=True)


async def delete_product(db: AsyncSession, model: str):
    return await product_functions.delete_product(db, model)


async def delete_all_products(db: AsyncSession):
    return await product_functions.delete_all_products(db)
