# ezelectronics/controllers/reviews.py
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.db import review_functions
from ezelectronics.db.models import User
from ezelectronics.db.schemas import ReviewSchema


async def add_review(db: AsyncSession, model: str, user: User, score: int, comment: str):
    await review_functions.add_review(db, model, user.username, score, comment)


async def get_product_reviews(db: AsyncSession, model: str):
    reviews = await review_functions.get_product_reviews(db, model)
    return [
        ReviewSchema(model=r.model, user=r.username, score=r.score, date=r.date, comment=r.comment)
        for r in reviews
    ]


async def delete_review(db: AsyncSession, model: str, user: User):
    await review_functions.delete_review(db, model, user.username)


async def delete_reviews_of_product(db: AsyncSession, model: str):
    await review_functions.delete_reviews_of_product(db, model)


async def delete_all_reviews(db: AsyncSession):
    await review_functions.delete_all_reviews(db)
