# ezelectronics/db/cart_functions.py
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy import delete

from ezelectronics.db.models import Cart, CartItem
from ezelectronics.errors import CartNotFoundError
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)


def recompute_total(cart: Cart) -> float:
    cart.total = sum(item.price * item.quantity for item in cart.items)
    return cart.total


# The unpaid cart of a customer, with its items loaded
async def get_current_cart(db: AsyncSession, username: str):
    result = await db.execute(
        select(Cart)
        .filter(Cart.customer == username, Cart.paid == False)  # noqa: E712
        .options(selectinload(Cart.items))
    )
    cart = result.scalars().first()
    if not cart:
        raise CartNotFoundError()
    return cart


def new_cart(db: AsyncSession, username: str) -> Cart:
    """Attach a fresh unpaid cart to the session; it is written on the next commit."""
    cart = Cart(customer=username, paid=False, payment_date=None, total=0.0, items=[])
    db.add(cart)
    _logger.info(f"Created cart for {username}")
    return cart


async def save_cart(db: AsyncSession, cart: Cart):
    recompute_total(cart)
    await db.commit()
    return cart


async def mark_cart_paid(db: AsyncSession, cart: Cart, payment_date: date = None):
    cart.paid = True
    cart.payment_date = payment_date or date.today()
    await db.commit()
    _logger.info(f"Cart {cart.id} of {cart.customer} paid on {cart.payment_date}")
    return True


async def clear_cart(db: AsyncSession, cart: Cart):
    cart.items.clear()
    return await save_cart(db, cart)


async def get_paid_carts(db: AsyncSession, username: str):
    result = await db.execute(
        select(Cart)
        .filter(Cart.customer == username, Cart.paid == True)  # noqa: E712
        .order_by(Cart.id)
        .options(selectinload(Cart.items))
    )
    return result.scalars().all()


async def get_all_carts(db: AsyncSession):
    result = await db.execute(select(Cart).order_by(Cart.id).options(selectinload(Cart.items)))
    return result.scalars().all()


async def delete_all_carts(db: AsyncSession):
    await db.execute(delete(CartItem))
    await db.execute(delete(Cart))
    await db.commit()
    _logger.info("Deleted all carts")
    return True
