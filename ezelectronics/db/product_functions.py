# ezelectronics/db/product_functions.py
from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete

from ezelectronics.db.models import Product, CategoryEnum
from ezelectronics.errors import (
    ProductNotFoundError,
    ProductAlreadyExistsError,
    EmptyProductStockError,
    LowProductStockError,
    DateError,
    GroupingError,
)
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)


def _resolve_date(value: Optional[date]) -> date:
    """Missing dates mean today; dates in the future are rejected."""
    today = date.today()
    if value is None:
        return today
    if value > today:
        raise DateError()
    return value


async def get_product_by_model(db: AsyncSession, model: str):
    result = await db.execute(select(Product).filter(Product.model == model))
    product = result.scalar_one_or_none()
    if not product:
        raise ProductNotFoundError()
    return product


async def new_model(db: AsyncSession, model: str, category: CategoryEnum, quantity: int,
                    details: Optional[str], selling_price: float, arrival_date: Optional[date]):
    arrival_date = _resolve_date(arrival_date)

    result = await db.execute(select(Product).filter(Product.model == model))
    if result.scalar_one_or_none():
        raise ProductAlreadyExistsError()

    product = Product(
        model=model,
        category=category,
        quantity=quantity,
        details=details,
        selling_price=selling_price,
        arrival_date=arrival_date,
    )
    db.add(product)
    await db.commit()
    _logger.info(f"Registered product {model} ({category.value}, quantity {quantity})")


# Restock: quantity is the increment, not the new value
async def update_model(db: AsyncSession, model: str, quantity: int, change_date: Optional[date]) -> int:
    change_date = _resolve_date(change_date)
    product = await get_product_by_model(db, model)
    if change_date < product.arrival_date:
        raise DateError()

    product.quantity += quantity
    await db.commit()
    _logger.info(f"Restocked {model} by {quantity}, now {product.quantity}")
    return product.quantity


async def sell_model(db: AsyncSession, model: str, quantity: int, selling_date: Optional[date],
                     commit: bool = True) -> int:
    """
    Decrement the stock of a model and return the remaining quantity.
    With commit=False the change is only flushed so the caller can group
    several sales in one transaction.
    """
    selling_date = _resolve_date(selling_date)
    product = await get_product_by_model(db, model)
    if selling_date < product.arrival_date:
        raise DateError()
    if product.quantity == 0:
        raise EmptyProductStockError()
    if product.quantity < quantity:
        raise LowProductStockError()

    product.quantity -= quantity
    if commit:
        await db.commit()
    else:
        await db.flush()
    _logger.info(f"Sold {quantity} of {model}, {product.quantity} left")
    return product.quantity


async def get_products(db: AsyncSession, grouping: Optional[str], category: Optional[str],
                       model: Optional[str], available_only: bool = False):
    """
    List products, optionally filtered by category or by model.
    grouping must name the single filter that is set, or be empty along with both filters.
    """
    query = select(Product)
    if grouping == "category":
        if category is None or model is not None:
            raise GroupingError()
        query = query.filter(Product.category == CategoryEnum(category))
    elif grouping == "model":
        if model is None or category is not None:
            raise GroupingError()
        await get_product_by_model(db, model)
        query = query.filter(Product.model == model)
    elif grouping is None:
        if category is not None or model is not None:
            raise GroupingError()
    else:
        raise GroupingError()

    if available_only:
        query = query.filter(Product.quantity > 0)

    result = await db.execute(query.order_by(Product.model))
    products = result.scalars().all()
    _logger.debug(f"get_products grouping={grouping} category={category} model={model}: {len(products)} rows")
    return products


async def delete_product(db: AsyncSession, model: str):
    product = await get_product_by_model(db, model)
    await db.delete(product)
    await db.commit()
    _logger.info(f"Deleted product {model}")
    return True


async def delete_all_products(db: AsyncSession):
    await db.execute(delete(Product))
    await db.commit()
    _logger.info("Deleted all products")
    return True
