# ezelectronics/controllers/carts.py
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.db import cart_functions, product_functions
from ezelectronics.db.models import Cart, CartItem, User
from ezelectronics.db.schemas import CartSchema, ProductInCartSchema
from ezelectronics.errors import (
    CartNotFoundError,
    EmptyCartError,
    EmptyProductStockError,
    LowProductStockError,
    ProductNotInCartError,
)
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)


def to_schema(cart: Cart) -> CartSchema:
    return CartSchema(
        customer=cart.customer,
        paid=cart.paid,
        payment_date=cart.payment_date,
        total=cart.total,
        products=[ProductInCartSchema.model_validate(item) for item in cart.items],
    )


async def get_cart(db: AsyncSession, user: User) -> CartSchema:
    """Current unpaid cart of the user, or an empty one when there is none."""
    try:
        cart = await cart_functions.get_current_cart(db, user.username)
    except CartNotFoundError:
        return CartSchema(customer=user.username)
    return to_schema(cart)


async def add_to_cart(db: AsyncSession, user: User, model: str) -> bool:
    """
    Add one unit of a product to the current cart, creating the cart if needed.
    The line's price and category are refreshed from the product on every add.
    """
    product = await product_functions.get_product_by_model(db, model)
    if product.quantity < 1:
        raise EmptyProductStockError()

    try:
        cart = await cart_functions.get_current_cart(db, user.username)
    except CartNotFoundError:
        cart = cart_functions.new_cart(db, user.username)

    line = next((item for item in cart.items if item.model == model), None)
    if line:
        line.quantity += 1
        line.price = product.selling_price
        line.category = product.category
    else:
        cart.items.append(CartItem(model=model, quantity=1, category=product.category, price=product.selling_price))

    await cart_functions.save_cart(db, cart)
    return True


async def checkout_cart(db: AsyncSession, user: User) -> bool:
    """
    Pay the current cart. Stock of every line is checked first, then all
    decrements and the paid flag are committed together; a failure on any
    line rolls back the whole checkout.
    """
    username = user.username
    cart = await cart_functions.get_current_cart(db, username)
    if not cart.items:
        raise EmptyCartError()

    for item in cart.items:
        product = await product_functions.get_product_by_model(db, item.model)
        if product.quantity == 0:
            raise EmptyProductStockError()
        if item.quantity > product.quantity:
            raise LowProductStockError()

    try:
        for item in cart.items:
            await product_functions.sell_model(db, item.model, item.quantity, None, commit=False)
        await cart_functions.mark_cart_paid(db, cart)
    except Exception:
        # rollback expires every loaded row, user included
        await db.rollback()
        _logger.warning(f"Checkout of {username} rolled back")
        raise
    return True


async def get_customer_carts(db: AsyncSession, user: User):
    carts = await cart_functions.get_paid_carts(db, user.username)
    return [to_schema(cart) for cart in carts]


async def remove_product_from_cart(db: AsyncSession, user: User, model: str) -> bool:
    await product_functions.get_product_by_model(db, model)
    cart = await cart_functions.get_current_cart(db, user.username)

    line = next((item for item in cart.items if item.model == model), None)
    if line is None:
        raise ProductNotInCartError()
    if line.quantity > 1:
        line.quantity -= 1
    else:
        cart.items.remove(line)

    await cart_functions.save_cart(db, cart)
    return True


async def clear_cart(db: AsyncSession, user: User) -> bool:
    cart = await cart_functions.get_current_cart(db, user.username)
    await cart_functions.clear_cart(db, cart)
    return True


async def delete_all_carts(db: AsyncSession) -> bool:
    return await cart_functions.delete_all_carts(db)


async def get_all_carts(db: AsyncSession):
    carts = await cart_functions.get_all_carts(db)
    return [to_schema(cart) for cart in carts]
