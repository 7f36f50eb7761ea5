# ezelectronics/db/init_db.py
from ezelectronics.db.database import engine, Base
from ezelectronics.db.models import User, Product, Cart, CartItem, Review


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def cleanup():
    """Delete every row of every table."""
    async with engine.begin() as conn:
        for table in (CartItem, Cart, Review, Product, User):
            await conn.execute(table.__table__.delete())
